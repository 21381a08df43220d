"""Downloading public files from storage buckets."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import httpx


@dataclass
class SupabaseStorage:
    """One file in a public storage bucket."""

    supabase_url: str
    bucket_name: str
    filename: str

    @property
    def url(self) -> str:
        """The public download URL of the file."""
        return (
            f"{self.supabase_url}/storage/v1/object/public/"
            f"{self.bucket_name}/{self.filename}"
        )

    async def download(self, http_client: httpx.AsyncClient | None = None) -> bytes:
        """Fetch the file's bytes; transport failures raise ``httpx.HTTPError``."""
        if http_client is None:
            async with httpx.AsyncClient() as owned:
                response = await owned.get(self.url)
        else:
            response = await http_client.get(self.url)
        return response.content

    async def save(
        self, file_path: str | Path, http_client: httpx.AsyncClient | None = None
    ) -> None:
        """Download the file and write it to ``file_path``."""
        data = await self.download(http_client)
        Path(file_path).write_bytes(data)
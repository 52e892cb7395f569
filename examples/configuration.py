"""Configuration — config-as-code, from_dict(), and binding paths to a filesystem.

Demonstrates creating S3FileSystem contexts for the default S3 endpoint and
for an S3-compatible service, and building paths that stay bound to them.
"""

from __future__ import annotations

import logging

from bucketpath import FileSystemConfig, S3FileSystem, S3Path, default_filesystem

if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)

    # --- Option 1: the process-wide default filesystem ---
    fs = default_filesystem()
    print(f"Default filesystem: {fs!r}")
    print(f"Bound to default:   {S3Path('/data/x').filesystem is fs}")

    # --- Option 2: config-as-code for an S3-compatible endpoint ---
    minio = S3FileSystem(FileSystemConfig(endpoint="minio.local:9000", options={"anon": True}))
    raw_data = minio.get_path("/raw", "2024", "events.json")
    print(f"\n{minio!r} -> {raw_data}")

    # --- Option 3: from_dict(), e.g. loaded from TOML or JSON ---
    cfg = FileSystemConfig.from_dict({"endpoint": "storage.internal", "options": {"region": "eu-west-1"}})
    internal = S3FileSystem(cfg)
    print(f"\n{internal.uri} options={internal.config.options}")

    # Derived paths keep their filesystem; strings resolve within it
    cleaned = raw_data.resolve_sibling("events.parquet")
    print(f"Sibling {cleaned} bound to minio: {cleaned.filesystem is minio}")

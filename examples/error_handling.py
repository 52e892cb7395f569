"""Error handling — catching InvalidPath, IncompatiblePaths, NotAbsolute, etc.

Demonstrates the normalized error hierarchy and how to handle errors
programmatically using structured attributes.
"""

from __future__ import annotations

from bucketpath import (
    IncompatiblePaths,
    InvalidPath,
    NotAbsolute,
    OperationNotSupported,
    PathIndexOutOfRange,
    S3Path,
    S3PathError,
)

if __name__ == "__main__":
    # --- InvalidPath (absolute path without a bucket) ---
    try:
        S3Path("//")
    except InvalidPath as exc:
        print(f"InvalidPath: {exc}")
        print(f"  path={exc.path}")

    # --- IncompatiblePaths (relativize across buckets) ---
    try:
        S3Path("/logs/app").relativize("/backups/app")
    except IncompatiblePaths as exc:
        print(f"\nIncompatiblePaths: {exc}")
        print(f"  reason={exc.reason}, other={exc.other}")

    # --- NotAbsolute (no working directory to resolve against) ---
    try:
        S3Path("reports/q1.csv").to_absolute_path()
    except NotAbsolute as exc:
        print(f"\nNotAbsolute: {exc}")

    # --- Builtin mix-ins still work ---
    try:
        S3Path("/b/x").name_at(5)
    except IndexError as exc:
        print(f"\nIndexError ({type(exc).__name__}): {exc}")
        assert isinstance(exc, PathIndexOutOfRange)

    # --- Unsupported operations always raise ---
    path = S3Path("/b/x")
    try:
        path.starts_with("/b")
    except OperationNotSupported as exc:
        print(f"OperationNotSupported: {exc}")

    # --- Catch any bucketpath error with the base class ---
    for raw in ["/", "x/y"]:
        try:
            S3Path(raw).to_uri()
        except S3PathError as exc:
            print(f"\nS3PathError ({type(exc).__name__}): {exc}")

    print("\nDone!")

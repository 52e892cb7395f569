"""Quickstart — parse, navigate and combine S3 paths.

Demonstrates:
- Parsing absolute and relative paths
- Reading the bucket and key an object-store client needs
- Navigating with parent, file_name and iteration
- Combining paths with resolve, resolve_sibling and relativize
"""

from __future__ import annotations

from bucketpath import S3Path

if __name__ == "__main__":
    report = S3Path("/analytics//reports/2024/q1.csv/")
    print(f"Path:    {report}")
    print(f"Bucket:  {report.bucket}")
    print(f"Key:     {report.key}")
    print(f"URI:     {report.to_uri()}")

    # Navigation
    print(f"Parent:  {report.parent}")
    print(f"Name:    {report.file_name}")
    print(f"Root:    {report.root}")
    print(f"Parts:   {[str(p) for p in report]}")

    # Combination
    q2 = report.resolve_sibling("q2.csv")
    print(f"Sibling: {q2}")
    archive = S3Path("/analytics/archive") / S3Path("/analytics").relativize(report)
    print(f"Archive: {archive}")
    print(f"Relative from 2024/: {S3Path('/analytics/reports/2024').relativize(q2)}")

    # Directory marker for a client writing a "folder" object
    location = report.parent.to_location()
    print(f"Marker:  {location.bucket}/{location.directory_marker}")

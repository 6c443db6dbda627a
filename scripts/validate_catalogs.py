"""Validate document type catalogs before deploying them.

Usage:
    python -m scripts.validate_catalogs [catalog_dir]
If catalog_dir is omitted, uses CATALOG_DIR from config (or the bundled
catalogs). Exits 1 when any entity kind's catalog fails to load.
"""

import os
import sys

from fleetdocs.core.config import get_settings
from fleetdocs.domain.enums import EntityKind
from fleetdocs.domain.exceptions import CatalogConfigurationException
from fleetdocs.infrastructure.catalog import get_catalog
from fleetdocs.shared.telemetry import setup_logging


def main() -> None:
    """Load every entity kind's catalog and report type counts per bucket."""
    if len(sys.argv) > 1:
        os.environ["CATALOG_DIR"] = sys.argv[1]
        get_settings.cache_clear()
    setup_logging()

    failed = 0
    for kind in EntityKind:
        try:
            catalog = get_catalog(kind)
        except CatalogConfigurationException as e:
            failed += 1
            print(f"{kind.value}: {e.message}", file=sys.stderr)
            for error in e.details.get("errors", []):
                print(f"  - {error}", file=sys.stderr)
            continue
        groups = catalog.group_by_category()
        counts = ", ".join(
            f"{bucket.value}={len(group.types)}" for bucket, group in groups.items()
        )
        print(f"{kind.value}: {len(catalog)} types ({counts})")

    if failed:
        sys.exit(1)
    print("Done. All catalogs valid.")


if __name__ == "__main__":
    main()

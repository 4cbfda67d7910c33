#!/usr/bin/env python3
"""
Item catalog population.

Standalone script loading weapon and armor definitions from a JSON manifest
into the catalog database configured by CATALOG_DATABASE_URL.

Usage:
    python populate_catalog.py path/to/manifest.json
"""

import asyncio
import logging
import sys
from datetime import datetime
from pathlib import Path

from destiny_bot.database.catalog import ItemCatalog
from destiny_bot.database.catalog_loader import load_manifest


def setup_logging() -> logging.Logger:
    """Setup logging for the population script"""
    Path('logs').mkdir(exist_ok=True)
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.FileHandler(f'logs/catalog_population_{datetime.now().strftime("%Y%m%d_%H%M%S")}.log'),
            logging.StreamHandler()
        ]
    )
    return logging.getLogger(__name__)


async def populate_catalog(manifest_path: Path) -> dict:
    """Load the manifest and store every entry in the catalog"""
    weapons, armors = load_manifest(manifest_path)
    
    catalog = ItemCatalog()
    await catalog.initialize()
    try:
        await catalog.add_items(weapons, armors)
    finally:
        await catalog.dispose()
    
    return {'weapons': len(weapons), 'armor': len(armors)}


async def main():
    """Main entry point for standalone script execution"""
    logger = setup_logging()
    
    if len(sys.argv) != 2:
        print(f"Usage: {sys.argv[0]} <manifest.json>")
        sys.exit(2)
    
    try:
        logger.info("Starting catalog population script...")
        results = await populate_catalog(Path(sys.argv[1]))
        
        print("\n" + "="*50)
        print("CATALOG POPULATION COMPLETED SUCCESSFULLY")
        print("="*50)
        print(f"Weapons stored: {results['weapons']}")
        print(f"Armor stored: {results['armor']}")
        print("="*50)
        
    except Exception as e:
        logger.error(f"Catalog population failed: {e}")
        print(f"\nERROR: {e}")
        sys.exit(1)


if __name__ == "__main__":
    asyncio.run(main())

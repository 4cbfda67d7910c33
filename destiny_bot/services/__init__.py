"""
Services package for the Destiny bot.

Identity lookup, loadout enrichment, item classification and the report
pipelines built on top of them.
"""

from .identity import IdentityResolver
from .inventory import InventoryEnricher
from .trials_report import TrialsReportService
from .xur import XurInventoryService

__all__ = ['IdentityResolver', 'InventoryEnricher', 'TrialsReportService', 'XurInventoryService']

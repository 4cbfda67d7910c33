"""
Command handlers: one ``handle`` per report type, independent of Discord.
"""

from .base import CommandHandler, RequestContext, TextResponse
from .trials import TrialsHandler
from .xur import XurHandler

__all__ = ['CommandHandler', 'RequestContext', 'TextResponse', 'TrialsHandler', 'XurHandler']

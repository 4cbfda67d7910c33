from destiny_bot.constants import CommandConstants
from destiny_bot.handlers.base import CommandHandler, RequestContext, TextResponse
from destiny_bot.services.trials_report import ReportStatus, TrialsReportService
from destiny_bot.utils.logger import setup_logger
from destiny_bot.views.trials_report import TrialsReportRenderer

logger = setup_logger(__name__)


class TrialsHandler(CommandHandler):
    """Handles requests for Trials of Osiris information."""
    
    def __init__(self, stats_client, profile_client):
        self.report_service = TrialsReportService(stats_client)
        self.renderer = TrialsReportRenderer(profile_client)
    
    async def handle(self, context: RequestContext) -> TextResponse:
        if context.wants_help:
            logger.info(f"@{context.user_name} needs help")
            return TextResponse(CommandConstants.TRIALS_HELP, private=True)
        
        logger.info(f'@{context.user_name} looking up "{context.text}"')
        report = await self.report_service.build_report(
            context.client, context.database, context.user_name, context.text
        )
        gamertag = report.player.gamertag
        if report.status == ReportStatus.PLAYER_NOT_FOUND:
            return TextResponse(f'Unable to identify "{gamertag}"', private=True)
        if report.status == ReportStatus.NO_DATA:
            return TextResponse(f'Could not find Trials data for "{gamertag}"', private=True)
        
        return TextResponse(self.renderer.render(report.rows, report.on_xbox))

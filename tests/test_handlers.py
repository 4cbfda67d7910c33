import asyncio
import unittest

from destiny_bot.clients.trials_report import TrialsReportClient
from destiny_bot.constants import CommandConstants
from destiny_bot.data_models.items import ItemStub
from destiny_bot.data_models.players import DestinyId
from destiny_bot.handlers import RequestContext, TextResponse, TrialsHandler, XurHandler
from tests.fakes import (
    BONES_OF_EAO, GJALLARHORN, THORN, FakeCatalog, FakeGameClient, FakeStatsClient,
    loadout, participant
)


def make_context(client, catalog, text='', user_name='guardian'):
    return RequestContext(user_name=user_name, text=text, client=client, database=catalog)


class TrialsHandlerTest(unittest.TestCase):
    def setUp(self):
        self.client = FakeGameClient(ids={('guardian', False): DestinyId(False, '100')})
        self.catalog = FakeCatalog()
        self.stats = FakeStatsClient([participant('1', 'Alice', elo=1800, kd=1.5)])
        self.handler = TrialsHandler(self.stats, TrialsReportClient('https://dtr.test'))

    def _respond(self, text=''):
        return asyncio.run(self.handler.respond(make_context(self.client, self.catalog, text)))

    def test_help_is_private(self):
        response = self._respond('help')

        self.assertEqual(response, TextResponse(CommandConstants.TRIALS_HELP, private=True))
        self.assertEqual(self.stats.calls, [])

    def test_unknown_gamertag(self):
        response = self._respond('Ghost123')

        self.assertEqual(response, TextResponse('Unable to identify "Ghost123"', private=True))

    def test_no_trials_data(self):
        self.stats.participants = []

        response = self._respond()

        self.assertEqual(response, TextResponse('Could not find Trials data for "guardian"', private=True))

    def test_report_for_participant_without_loadout(self):
        response = self._respond()

        self.assertFalse(response.private)
        self.assertEqual(
            response.text,
            "```\n[Alice](https://dtr.test/ps/Alice)  1800  1.50  Unknown  |  Unknown  Unknown  Unknown\n```"
        )

    def test_report_lists_equipment(self):
        self.stats.participants.append(participant('2', 'Bob', elo=2100, kd=3.1))
        self.client.equip('2', loadout('Gunslinger', [THORN, GJALLARHORN], [BONES_OF_EAO]))

        lines = self._respond().text.split('\n')

        self.assertEqual(len(lines), 4)
        self.assertIn('Thorn', lines[2])
        self.assertIn('Gjallarhorn', lines[2])
        self.assertTrue(lines[2].endswith('|  Bones of Eao'))

    def test_upstream_failure_becomes_private_message(self):
        self.client.failing_tokens = {'1'}

        response = self._respond()

        self.assertTrue(response.private)
        self.assertIn('Bungie.net', response.text)

    def test_unexpected_failure_becomes_generic_message(self):
        async def broken(destiny_id):
            raise RuntimeError('boom')
        self.stats.get_trials_stats = broken

        response = self._respond()

        self.assertEqual(response, TextResponse(CommandConstants.GENERIC_FAILURE, private=True))


class XurHandlerTest(unittest.TestCase):
    def setUp(self):
        self.catalog = FakeCatalog()
        self.handler = XurHandler()

    def _respond(self, client, text=''):
        return asyncio.run(self.handler.respond(make_context(client, self.catalog, text)))

    def test_help_is_private(self):
        response = self._respond(FakeGameClient(xur=[ItemStub(THORN.id, False)]), 'help')

        self.assertEqual(response, TextResponse(CommandConstants.XUR_HELP, private=True))

    def test_empty_stock_is_unavailable(self):
        response = self._respond(FakeGameClient(xur=[]))

        self.assertEqual(response.text, 'Xur is not available at the moment...')
        self.assertEqual(self.catalog.opened, 0)

    def test_missing_stock_is_unavailable(self):
        response = self._respond(FakeGameClient(xur=None))

        self.assertEqual(response.text, CommandConstants.XUR_UNAVAILABLE)

    def test_lists_resolved_items_in_stock_order(self):
        stock = [
            ItemStub(BONES_OF_EAO.id, is_armor=True),
            ItemStub(404, is_armor=False),
            ItemStub(GJALLARHORN.id, is_armor=False),
            ItemStub(THORN.id, is_armor=True),
        ]

        response = self._respond(FakeGameClient(xur=stock))

        self.assertFalse(response.private)
        self.assertEqual(response.text, "```\nBones of Eao\nGjallarhorn\n```")
        self.assertEqual(self.catalog.released, 1)


if __name__ == '__main__':
    unittest.main()

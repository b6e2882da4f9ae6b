import json

from channels.db import database_sync_to_async
from channels.layers import get_channel_layer
from channels.routing import URLRouter
from channels.testing import WebsocketCommunicator
from django.contrib.auth.models import AnonymousUser
from django.test import TransactionTestCase, override_settings

from core.tests.helpers import make_user, make_lookups, make_session
from gamesessions.constants import SESSION_FEED_GROUP_PREFIX
from gamesessions.routing import websocket_urlpatterns

IN_MEMORY_LAYERS = {'default': {'BACKEND': 'channels.layers.InMemoryChannelLayer'}}


@database_sync_to_async
def create_feed_fixtures(is_public):
    creator = make_user('host')
    outsider = make_user('outsider')
    platform, session_type, duration = make_lookups()
    session = make_session(creator, platform, session_type, duration, is_public=is_public)
    return creator, outsider, session


@override_settings(CHANNEL_LAYERS=IN_MEMORY_LAYERS)
class TestSessionFeedConsumer(TransactionTestCase):
    def communicator(self, session_id, user):
        communicator = WebsocketCommunicator(URLRouter(websocket_urlpatterns), f'/ws/session/{session_id}/')
        communicator.scope['user'] = user
        return communicator

    async def test_logged_in_user_can_follow_public_session(self):
        _, outsider, session = await create_feed_fixtures(is_public=True)

        communicator = self.communicator(session.pk, outsider)
        connected, _ = await communicator.connect()

        assert connected
        await communicator.disconnect()

    async def test_anonymous_user_is_rejected(self):
        _, _, session = await create_feed_fixtures(is_public=True)

        communicator = self.communicator(session.pk, AnonymousUser())
        connected, _ = await communicator.connect()

        assert not connected

    async def test_private_session_is_only_for_signed_gamers(self):
        creator, outsider, session = await create_feed_fixtures(is_public=False)

        outsider_feed = self.communicator(session.pk, outsider)
        connected, _ = await outsider_feed.connect()
        assert not connected

        creator_feed = self.communicator(session.pk, creator)
        connected, _ = await creator_feed.connect()
        assert connected
        await creator_feed.disconnect()

    async def test_missing_session_is_rejected(self):
        creator, _, _ = await create_feed_fixtures(is_public=True)

        communicator = self.communicator('00000000-0000-0000-0000-000000000000', creator)
        connected, _ = await communicator.connect()

        assert not connected

    async def test_group_messages_are_forwarded_as_json(self):
        creator, _, session = await create_feed_fixtures(is_public=True)
        communicator = self.communicator(session.pk, creator)
        await communicator.connect()

        await get_channel_layer().group_send(
            f'{SESSION_FEED_GROUP_PREFIX}{session.pk}',
            {'type': 'broadcast_message', 'html': '<li>hello</li>', 'message_type': 'comment'},
        )

        response = json.loads(await communicator.receive_from())
        assert response == {'type': 'comment', 'html': '<li>hello</li>'}
        await communicator.disconnect()

# gamesessions/consumers.py

# Import json because WebSocket messages are sent as text in JSON format.
import json
# Import AsyncWebsocketConsumer from channels.generic.websocket because this is the base class for our real-time consumer.
from channels.generic.websocket import AsyncWebsocketConsumer
# Import database_sync_to_async from channels.db because checking sign-ups talks to the sync database.
from channels.db import database_sync_to_async

# Import the group prefix and the async session loader.
from .constants import SESSION_FEED_GROUP_PREFIX
from .services import get_by_id_async

"""
This class handles the live message feed on a session page. New
comments and join/leave/cancel messages are broadcast to the
session's group by the views, and this consumer forwards them to
the browser so they show up without a page refresh.
Anyone logged in can follow a public session; private sessions can
only be followed by the gamers signed up to them.
"""
class SessionFeedConsumer(AsyncWebsocketConsumer):

    async def connect(self):
        self.session_id = self.scope['url_route']['kwargs']['session_id']
        self.group_name = f'{SESSION_FEED_GROUP_PREFIX}{self.session_id}'
        user = self.scope.get('user')

        if user is None or not user.is_authenticated:
            await self.close()
            return

        session = await get_by_id_async(self.session_id)
        if session is None or not await self.can_follow(session, user):
            await self.close()
            return

        await self.channel_layer.group_add(self.group_name, self.channel_name)
        await self.accept()

    async def disconnect(self, close_code):
        await self.channel_layer.group_discard(self.group_name, self.channel_name)

    @database_sync_to_async
    def can_follow(self, session, user):
        if session.settings.is_public:
            return True
        return session.signed_gamers.filter(pk=user.pk).exists()

    # Forwards a broadcast feed message straight to the browser
    async def broadcast_message(self, event):
        await self.send(text_data=json.dumps({
            'type': event['message_type'],
            'html': event['html'],
        }))

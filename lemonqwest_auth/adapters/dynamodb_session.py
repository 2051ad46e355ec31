"""
DynamoDB Session Adapter - AWS-native session slot.
"""

from typing import Optional, Dict, Any
import asyncio
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from lemonqwest_auth.ports.session_port import SessionPort
from lemonqwest_auth.domain.session import SessionState
from lemonqwest_auth.domain.user import UserRole
from lemonqwest_auth.domain.errors import SessionStoreError

logger = logging.getLogger(__name__)


class DynamoDBSessionAdapter(SessionPort):
    """
    DynamoDB-backed session slot.

    The session is a single item, so each write is atomic.
    boto3 is synchronous; calls run in a worker thread.
    """

    def __init__(
        self,
        table_name: str = "lemonqwest-sessions",
        region_name: str = "us-east-1",
        slot_id: str = "current",
        table=None,
    ):
        """
        Initialize DynamoDB session adapter.

        Args:
            table_name: DynamoDB table name
            region_name: AWS region
            slot_id: Partition key value of the session item
            table: Optional boto3 Table resource (created if None)

        Table schema:
            - Partition key: slot_id (S)
        """
        super().__init__()
        self._table_name = table_name
        self._slot_id = slot_id
        if table is None:
            dynamodb = boto3.resource("dynamodb", region_name=region_name)
            table = dynamodb.Table(table_name)
        self._table = table

    async def current_session(self) -> Optional[SessionState]:
        """Get the session item."""
        try:
            response = await asyncio.to_thread(
                self._table.get_item,
                Key={"slot_id": self._slot_id},
                ConsistentRead=True,
            )
        except (BotoCoreError, ClientError) as e:
            raise SessionStoreError(f"Cannot read session from {self._table_name}: {e}") from e

        if "Item" not in response:
            return None

        try:
            return self._item_to_session(response["Item"])
        except (KeyError, ValueError) as e:
            raise SessionStoreError(f"Malformed session item in {self._table_name}: {e}") from e

    async def set_current_user(self, user_id: str, role: UserRole, is_admin: bool) -> None:
        """Replace the session item."""
        state = SessionState(user_id=user_id, role=role, is_admin=is_admin)
        try:
            await asyncio.to_thread(self._table.put_item, Item=self._session_to_item(state))
        except (BotoCoreError, ClientError) as e:
            raise SessionStoreError(f"Cannot write session to {self._table_name}: {e}") from e

        logger.debug("Session %s set to user %s", self._slot_id, user_id)
        self._publish(user_id)

    async def clear_current_user(self) -> None:
        """Delete the session item. Deleting a missing item succeeds."""
        try:
            await asyncio.to_thread(self._table.delete_item, Key={"slot_id": self._slot_id})
        except (BotoCoreError, ClientError) as e:
            raise SessionStoreError(f"Cannot clear session in {self._table_name}: {e}") from e

        logger.debug("Session %s cleared", self._slot_id)
        self._publish(None)

    def _session_to_item(self, state: SessionState) -> Dict[str, Any]:
        """Convert SessionState to DynamoDB item."""
        item = state.to_dict()
        item["slot_id"] = self._slot_id
        return item

    def _item_to_session(self, item: Dict[str, Any]) -> SessionState:
        """Convert DynamoDB item to SessionState."""
        return SessionState.from_dict(item)

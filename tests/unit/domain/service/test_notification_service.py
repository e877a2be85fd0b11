"""Unit tests for NotificationService."""

import pytest

from canopy.config import NotificationSettings
from canopy.domain.repository import NotificationRepository
from canopy.domain.service import NotificationService
from canopy.domain.value import NotificationType
from canopy.persistence.repository.inmemory import InMemoryNotificationRepository
from tests.conftest import make_author, make_post
from tests.harness import create_env_fixture

unit_env = create_env_fixture()

ALICE = make_author("alice@example.com", "Alice")
BOB = make_author("bob@example.com", "Bob")


class TestNotify:
    """Tests for notify."""

    @pytest.mark.asyncio
    async def test_notify_stores_unread_record(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        post = make_post()

        notification = await notification_service.notify(
            NotificationType.COMMENT,
            actor=ALICE,
            to_identity=BOB.identity,
            post_id=post.id,
            message="Alice commented on your post",
        )

        assert notification is not None
        assert notification.read is False
        assert notification.from_user == ALICE
        assert notification.comment_id is None

    @pytest.mark.asyncio
    async def test_self_notification_skipped(self, unit_env):
        notification_service = await unit_env.get(NotificationService)
        notification_repo = await unit_env.get(NotificationRepository)

        result = await notification_service.notify(
            NotificationType.COMMENT_LIKE,
            actor=ALICE,
            to_identity=ALICE.identity,
            post_id=make_post().id,
            message="Alice liked your comment",
        )

        assert result is None
        assert await notification_repo.find_for_recipient(ALICE.identity) == []

    @pytest.mark.asyncio
    async def test_disabled_setting_skips(self):
        repo = InMemoryNotificationRepository()
        notification_service = NotificationService(
            repo, settings=NotificationSettings(enabled=False)
        )

        result = await notification_service.notify(
            NotificationType.COMMENT,
            actor=ALICE,
            to_identity=BOB.identity,
            post_id=make_post().id,
            message="Alice commented on your post",
        )

        assert result is None
        assert await repo.find_for_recipient(BOB.identity) == []


class TestInbox:
    """Tests for listing and marking notifications."""

    async def _send(self, service, count):
        post = make_post()
        sent = []
        for i in range(count):
            sent.append(
                await service.notify(
                    NotificationType.COMMENT,
                    actor=ALICE,
                    to_identity=BOB.identity,
                    post_id=post.id,
                    message=f"message {i}",
                )
            )
        return sent

    @pytest.mark.asyncio
    async def test_list_respects_inbox_limit(self):
        service = NotificationService(
            InMemoryNotificationRepository(),
            settings=NotificationSettings(inbox_limit=2),
        )
        await self._send(service, 3)

        inbox = await service.list_for(BOB.identity)

        assert len(inbox) == 2
        assert inbox[0].created_at >= inbox[1].created_at

    @pytest.mark.asyncio
    async def test_mark_read_only_touches_own(self, unit_env):
        service = await unit_env.get(NotificationService)
        sent = await self._send(service, 2)

        foreign = await service.mark_read(ALICE.identity, [n.id for n in sent])
        own = await service.mark_read(BOB.identity, [sent[0].id])

        assert foreign == 0
        assert own == 1
        inbox = {n.id: n for n in await service.list_for(BOB.identity)}
        assert inbox[sent[0].id].read is True
        assert inbox[sent[1].id].read is False

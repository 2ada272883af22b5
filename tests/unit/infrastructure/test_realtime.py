"""
Unit tests for realtime change handling and live lists.
"""

import asyncio
from unittest.mock import AsyncMock, MagicMock

import pytest

from opsdesk.domain.models import StorageError, SyncError
from opsdesk.domain.repositories import ListFilters
from opsdesk.infrastructure.realtime import (
    ChangeEvent,
    ChangeType,
    LiveList,
    SubscriptionState,
    SupabaseChangeFeed,
)


class TestChangeEvent:
    """Test cases for payload normalization."""

    def test_server_shape(self):
        event = ChangeEvent.from_payload({
            "data": {"table": "incomes", "type": "UPDATE", "record": {"id": 3}, "old_record": {"id": 3}}
        })

        assert event.type is ChangeType.UPDATE
        assert event.table == "incomes"
        assert event.record_id == 3

    def test_flat_shape(self):
        event = ChangeEvent.from_payload({"eventType": "delete", "new": {}, "old": {"id": 9}})

        assert event.type is ChangeType.DELETE
        assert event.record_id == 9

    @pytest.mark.parametrize("payload", [None, "INSERT", {"data": "x"}, {"eventType": "TRUNCATE"}])
    def test_rejects_unrecognized_payloads(self, payload):
        with pytest.raises(SyncError):
            ChangeEvent.from_payload(payload)


class TestLiveList:
    """Test cases for LiveList."""

    @pytest.mark.asyncio
    async def test_start_loads_rows_and_subscribes(self, income_repository, change_feed, fake_supabase):
        fake_supabase.seed("incomes", customer_name="Acme", amount=10, date="2024-01-01")

        live = LiveList(income_repository, change_feed)
        await live.start()

        assert live.state is SubscriptionState.ACTIVE
        assert [i.customer for i in live.rows] == ["Acme"]
        assert [table for table, _ in change_feed.subscriptions.values()] == ["incomes"]
        await live.stop()

    @pytest.mark.asyncio
    async def test_insert_update_delete(self, income_repository, change_feed):
        async with LiveList(income_repository, change_feed) as live:
            change_feed.emit("incomes", "INSERT", new={"id": 1, "customer_name": "A", "amount": 5})
            change_feed.emit("incomes", "INSERT", new={"id": 2, "customer_name": "B", "amount": 6})
            assert [i.id for i in live.rows] == [2, 1]

            change_feed.emit("incomes", "UPDATE", new={"id": 1, "customer_name": "A2", "amount": 7})
            assert [(i.id, i.customer) for i in live.rows] == [(2, "B"), (1, "A2")]

            change_feed.emit("incomes", "DELETE", old={"id": 2})
            assert [i.id for i in live.rows] == [1]

    @pytest.mark.asyncio
    async def test_duplicate_insert_replaces(self, client_repository, change_feed):
        async with LiveList(client_repository, change_feed) as live:
            change_feed.emit("clients", "INSERT", new={"id": 1, "client_name": "A"})
            change_feed.emit("clients", "INSERT", new={"id": 1, "client_name": "A again"})

            assert [c.name for c in live.rows] == ["A again"]

    @pytest.mark.asyncio
    async def test_unknown_ids_are_noops(self, client_repository, change_feed):
        async with LiveList(client_repository, change_feed) as live:
            change_feed.emit("clients", "INSERT", new={"id": 1, "client_name": "A"})
            change_feed.emit("clients", "UPDATE", new={"id": 5, "client_name": "ghost"})
            change_feed.emit("clients", "DELETE", old={"id": 6})

            assert [c.id for c in live.rows] == [1]

    @pytest.mark.asyncio
    async def test_owner_filter_applies_to_changes(self, client_repository, change_feed):
        async with LiveList(client_repository, change_feed, ListFilters(owner_id="user-1")) as live:
            change_feed.emit("clients", "INSERT", new={"id": 1, "client_name": "Mine", "owner_id": "user-1"})
            change_feed.emit("clients", "INSERT", new={"id": 2, "client_name": "Theirs", "owner_id": "user-2"})
            assert [c.id for c in live.rows] == [1]

            change_feed.emit("clients", "UPDATE", new={"id": 1, "client_name": "Gone", "owner_id": "user-2"})
            assert live.rows == []

    @pytest.mark.asyncio
    async def test_bad_change_triggers_single_refetch(self, client_repository, change_feed, fake_supabase):
        fake_supabase.seed("clients", client_name="Server copy")

        async with LiveList(client_repository, change_feed) as live:
            fake_supabase.seed("clients", client_name="Missed")
            selects_before = len(fake_supabase.executed)

            change_feed.emit("clients", "INSERT", new={"client_name": "no id"})
            change_feed.emit("clients", "DELETE", old={})
            await live.wait_idle()

            assert len(fake_supabase.executed) == selects_before + 1
            assert [c.name for c in live.rows] == ["Missed", "Server copy"]

    @pytest.mark.asyncio
    async def test_failed_refetch_keeps_rows(self, client_repository, change_feed, fake_supabase):
        fake_supabase.seed("clients", client_name="Kept")

        async with LiveList(client_repository, change_feed) as live:
            fake_supabase.fail("clients")
            change_feed.emit("clients", "UPDATE", new={"client_name": "no id"})
            await live.wait_idle()

            assert [c.name for c in live.rows] == ["Kept"]

    @pytest.mark.asyncio
    async def test_unexpected_refetch_error_is_contained(self, client_repository, change_feed, fake_supabase):
        fake_supabase.seed("clients", client_name="Kept")

        async with LiveList(client_repository, change_feed) as live:
            client_repository.list = AsyncMock(side_effect=RuntimeError("socket closed"))
            change_feed.emit("clients", "UPDATE", new={"client_name": "no id"})
            task = live._refetch_task
            await live.wait_idle()

            assert task.exception() is None
            assert [c.name for c in live.rows] == ["Kept"]

    @pytest.mark.asyncio
    async def test_change_during_initial_load_is_kept(self, client_repository, change_feed, fake_supabase):
        load = client_repository.list

        async def list_then_commit(filters=None):
            snapshot = await load(filters)
            committed = fake_supabase.seed("clients", client_name="Committed during load")
            change_feed.emit("clients", "INSERT", new=committed)
            return snapshot

        client_repository.list = list_then_commit

        async with LiveList(client_repository, change_feed) as live:
            assert [c.name for c in live.rows] == ["Committed during load"]

    @pytest.mark.asyncio
    async def test_queued_insert_already_in_snapshot_is_not_duplicated(self, client_repository, change_feed, fake_supabase):
        load = client_repository.list

        async def commit_then_list(filters=None):
            committed = fake_supabase.seed("clients", client_name="Asha")
            change_feed.emit("clients", "INSERT", new=committed)
            return await load(filters)

        client_repository.list = commit_then_list

        async with LiveList(client_repository, change_feed) as live:
            assert [c.name for c in live.rows] == ["Asha"]

    @pytest.mark.asyncio
    async def test_bad_change_during_initial_load_refetches_once(self, client_repository, change_feed, fake_supabase):
        load = client_repository.list
        calls = []

        async def list_with_noise(filters=None):
            calls.append(filters)
            snapshot = await load(filters)
            if len(calls) == 1:
                fake_supabase.seed("clients", client_name="Missed")
                change_feed.emit("clients", "INSERT", new={"client_name": "no id"})
                change_feed.emit("clients", "DELETE", old={})
            return snapshot

        client_repository.list = list_with_noise

        async with LiveList(client_repository, change_feed) as live:
            await live.wait_idle()

            assert len(calls) == 2
            assert [c.name for c in live.rows] == ["Missed"]

    @pytest.mark.asyncio
    async def test_events_after_stop_are_ignored(self, client_repository, change_feed):
        live = LiveList(client_repository, change_feed)
        await live.start()
        callback = next(iter(change_feed.subscriptions.values()))[1]
        await live.stop()

        callback({"data": {"type": "INSERT", "record": {"id": 1, "client_name": "late"}}})

        assert live.rows == []
        assert live.state is SubscriptionState.UNSUBSCRIBED

    @pytest.mark.asyncio
    async def test_stop_releases_own_handle_only(self, client_repository, income_repository, change_feed):
        clients = LiveList(client_repository, change_feed)
        incomes = LiveList(income_repository, change_feed)
        await clients.start()
        await incomes.start()
        incomes_handle = incomes._handle

        await clients.stop()
        await clients.stop()

        assert list(change_feed.subscriptions) == [incomes_handle]
        assert len(change_feed.unsubscribed) == 1
        await incomes.stop()

    @pytest.mark.asyncio
    async def test_failed_initial_load_unsubscribes(self, client_repository, change_feed, fake_supabase):
        fake_supabase.fail("clients")
        live = LiveList(client_repository, change_feed)

        with pytest.raises(StorageError):
            await live.start()

        assert live.state is SubscriptionState.UNSUBSCRIBED
        assert change_feed.subscriptions == {}

    @pytest.mark.asyncio
    async def test_start_twice_is_noop(self, client_repository, change_feed):
        async with LiveList(client_repository, change_feed) as live:
            await live.start()

            assert len(change_feed.subscriptions) == 1


class TestSupabaseChangeFeed:
    """Test cases for the Supabase channel adapter."""

    @pytest.mark.asyncio
    async def test_subscribe_and_unsubscribe(self):
        client = MagicMock()
        channel = MagicMock()
        channel.subscribe = AsyncMock()
        client.channel.return_value = channel
        client.remove_channel = AsyncMock()
        callback = MagicMock()

        feed = SupabaseChangeFeed(client, schema="public")
        handle = await feed.subscribe("credentials", callback)

        assert handle is channel
        assert client.channel.call_args.args[0].startswith("rt-credentials-")
        channel.on_postgres_changes.assert_called_once_with(
            "*", callback=callback, table="credentials", schema="public"
        )
        channel.subscribe.assert_awaited_once()

        await feed.unsubscribe(handle)
        client.remove_channel.assert_awaited_once_with(channel)

    @pytest.mark.asyncio
    async def test_channel_names_are_unique(self):
        client = MagicMock()
        client.channel.return_value.subscribe = AsyncMock()

        feed = SupabaseChangeFeed(client, schema="public")
        await feed.subscribe("incomes", MagicMock())
        await feed.subscribe("incomes", MagicMock())

        first, second = [c.args[0] for c in client.channel.call_args_list]
        assert first != second

"""
Unit tests for Lender Service
"""
import pytest
from datetime import datetime, timezone

from app.modules.lenders.models import LenderStatus
from app.modules.lenders.services import LenderService

from tests.conftest import get_lender


class TestLenderStatus:
    """Tests for lender status updates"""

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_set_status_ignores_owner(self, db_session, make_lender):
        await make_lender(added_by="someone-else")
        closed_at = datetime(2026, 3, 1, tzinfo=timezone.utc)

        matched = await LenderService.set_status(db_session, "L1", LenderStatus.CLOSED, closed_at)

        assert matched == 1
        lender = await get_lender(db_session, "L1")
        assert lender.status == LenderStatus.CLOSED
        assert lender.closed_date is not None

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_set_status_without_profile(self, db_session):
        matched = await LenderService.set_status(db_session, "nobody", LenderStatus.ACTIVE, None)

        assert matched == 0


class TestLenderDeletion:
    """Tests for owner-scoped lender deletion"""

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_owner_can_delete(self, db_session, make_lender):
        await make_lender(first_name="Grace", last_name="Hopper")

        lender = await LenderService.delete_owned_lender(db_session, "L1", "user-1")

        assert lender.display_name == "Grace Hopper"
        assert await get_lender(db_session, "L1") is None

    @pytest.mark.integration
    @pytest.mark.asyncio
    async def test_non_owner_cannot_delete(self, db_session, make_lender):
        await make_lender(added_by="user-2")

        assert await LenderService.delete_owned_lender(db_session, "L1", "user-1") is None
        assert await get_lender(db_session, "L1") is not None

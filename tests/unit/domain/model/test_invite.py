"""Tests for the Invite entity and InviteCode value object."""

from datetime import datetime, timedelta, timezone
from uuid import uuid4

import pytest
from pydantic import ValidationError

from tenancy.domain.model import Invite
from tenancy.domain.value import InviteCode, InviteVerdict, UserId, WorkspaceId
from tests.conftest import make_invite


def _user() -> UserId:
    return UserId(uuid4())


class TestInviteCode:
    """Tests for InviteCode normalization and format."""

    def test_code_is_uppercased_and_trimmed(self):
        assert InviteCode("  abcd2345 ").root == "ABCD2345"

    @pytest.mark.parametrize("value", ["abc", "ABCD-234", "", "A" * 33])
    def test_malformed_code_rejected(self, value):
        with pytest.raises(ValidationError):
            InviteCode(value)

    def test_redacted_keeps_only_prefix(self):
        assert InviteCode("SECRET42").redacted == "SEC..."


class TestInviteInvariants:
    """Tests for the usage counting rules."""

    def test_used_count_must_match_used_by(self):
        invite = make_invite(WorkspaceId(uuid4()))
        with pytest.raises(ValidationError):
            Invite.model_validate({**invite.model_dump(), "used_count": 1})

    def test_used_count_cannot_exceed_max_uses(self):
        with pytest.raises(ValidationError):
            make_invite(
                WorkspaceId(uuid4()),
                max_uses=1,
                used_by=frozenset({_user(), _user()}),
                active=False,
            )

    def test_invite_at_cap_must_be_inactive(self):
        with pytest.raises(ValidationError):
            make_invite(WorkspaceId(uuid4()), max_uses=1, used_by=frozenset({_user()}))

    def test_max_uses_must_be_positive(self):
        with pytest.raises(ValidationError):
            make_invite(WorkspaceId(uuid4()), max_uses=0)


class TestCheckEligibility:
    """Tests for the invite-only redemption predicate."""

    def test_fresh_invite_is_valid(self):
        invite = make_invite(WorkspaceId(uuid4()))
        now = datetime.now(timezone.utc)
        assert invite.check_eligibility(now) == InviteVerdict.VALID

    def test_expired_invite(self):
        invite = make_invite(WorkspaceId(uuid4()), expires_in=timedelta(seconds=-1))
        assert (
            invite.check_eligibility(datetime.now(timezone.utc))
            == InviteVerdict.EXPIRED
        )

    def test_expiry_instant_itself_is_still_valid(self):
        invite = make_invite(WorkspaceId(uuid4()))
        assert invite.check_eligibility(invite.expires_at) == InviteVerdict.VALID

    def test_revoked_invite_reports_inactive_before_expired(self):
        invite = make_invite(
            WorkspaceId(uuid4()), expires_in=timedelta(days=-1), active=False
        )
        assert (
            invite.check_eligibility(datetime.now(timezone.utc))
            == InviteVerdict.INACTIVE
        )

    def test_invite_deactivated_by_cap_reports_max_uses(self):
        invite = make_invite(
            WorkspaceId(uuid4()),
            max_uses=1,
            used_by=frozenset({_user()}),
            active=False,
        )
        assert (
            invite.check_eligibility(datetime.now(timezone.utc))
            == InviteVerdict.MAX_USES_REACHED
        )


class TestRecordUse:
    """Tests for recording a redemption."""

    def test_record_use_adds_user_and_counts(self):
        invite = make_invite(WorkspaceId(uuid4()), max_uses=3)
        user_id = _user()

        used = invite.record_use(user_id)

        assert used.used_count == 1
        assert used.has_been_used_by(user_id)
        assert used.active is True
        # Original is untouched
        assert invite.used_count == 0

    def test_last_use_deactivates(self):
        invite = make_invite(WorkspaceId(uuid4()), max_uses=2)

        used = invite.record_use(_user()).record_use(_user())

        assert used.used_count == 2
        assert used.active is False
        assert used.is_exhausted

    def test_unlimited_invite_stays_active(self):
        invite = make_invite(WorkspaceId(uuid4()))
        for _ in range(50):
            invite = invite.record_use(_user())

        assert invite.used_count == 50
        assert invite.active is True

    def test_deactivate_keeps_usage(self):
        user_id = _user()
        invite = make_invite(WorkspaceId(uuid4()), used_by=frozenset({user_id}))

        revoked = invite.deactivate()

        assert revoked.active is False
        assert revoked.used_by == frozenset({user_id})

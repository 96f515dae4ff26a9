"""Unit tests for session identity models."""

import pytest
from pydantic import ValidationError

from fixlog.models.session import Direction, SessionID


@pytest.mark.unit
class TestSessionID:
    """Tests for SessionID model."""

    def test_string_form(self) -> None:
        """The string form is BEGIN:SENDER->TARGET."""
        session_id = SessionID(
            begin_string="FIX.4.2", sender_comp_id="BANK", target_comp_id="EXCH"
        )
        assert str(session_id) == "FIX.4.2:BANK->EXCH"

    def test_string_form_with_qualifier(self) -> None:
        """A qualifier is appended after a colon."""
        session_id = SessionID(
            begin_string="FIX.4.2",
            sender_comp_id="BANK",
            target_comp_id="EXCH",
            session_qualifier="MD",
        )
        assert str(session_id) == "FIX.4.2:BANK->EXCH:MD"

    def test_equal_ids_hash_equal(self) -> None:
        """Equal identities can key the same dict entry."""
        a = SessionID(begin_string="FIX.4.2", sender_comp_id="BANK", target_comp_id="EXCH")
        b = SessionID(begin_string="FIX.4.2", sender_comp_id="BANK", target_comp_id="EXCH")

        assert a == b
        assert {a: 1}[b] == 1

    def test_is_immutable(self, session_id: SessionID) -> None:
        """Fields cannot be reassigned."""
        with pytest.raises(ValidationError):
            session_id.sender_comp_id = "OTHER"  # type: ignore[misc]

    def test_empty_comp_id_rejected(self) -> None:
        """Empty comp ids fail validation."""
        with pytest.raises(ValidationError):
            SessionID(begin_string="FIX.4.2", sender_comp_id="", target_comp_id="EXCH")


@pytest.mark.unit
class TestDirection:
    """Tests for Direction enum."""

    def test_values(self) -> None:
        """Both directions are defined."""
        assert {d.value for d in Direction} == {"inbound", "outbound"}

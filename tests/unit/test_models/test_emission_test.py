"""Unit tests for EmissionTest record model."""

import pytest

from emission_testing.core.exceptions import TestStateError
from emission_testing.core.models.emission_test import EmissionTest, TestState


class TestEmissionTestModel:
    """Test EmissionTest record and its transition helpers."""

    def test_create_pending(self):
        """Test a new record starts PENDING with no verdict."""
        record = EmissionTest(vehicle_id="Vehicle_1")

        assert record.state is TestState.PENDING
        assert record.compliance_status is None
        assert record.emission_level is None
        assert record.is_completed is False

    def test_empty_vehicle_id(self):
        """Test the vehicle id is required."""
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            EmissionTest(vehicle_id="")

    def test_full_transition(self):
        """Test PENDING → IN_PROGRESS → COMPLETED."""
        record = EmissionTest(vehicle_id="Vehicle_1")

        record.mark_in_progress()
        assert record.state is TestState.IN_PROGRESS

        record.complete(True, 150.0, 180.0)
        assert record.state is TestState.COMPLETED
        assert record.compliance_status is True
        assert record.emission_level == 150.0
        assert record.legal_limit == 180.0
        assert record.is_completed is True

    def test_cannot_skip_in_progress(self):
        """Test completing a PENDING record is refused."""
        record = EmissionTest(vehicle_id="Vehicle_1")

        with pytest.raises(TestStateError):
            record.complete(True, 150.0, 180.0)

        assert record.state is TestState.PENDING
        assert record.compliance_status is None

    def test_verdict_is_write_once(self):
        """Test a COMPLETED record's verdict cannot be overwritten."""
        record = EmissionTest(vehicle_id="Vehicle_1")
        record.mark_in_progress()
        record.complete(False, 200.0, 180.0)

        with pytest.raises(TestStateError):
            record.complete(True, 100.0, 180.0)

        assert record.compliance_status is False
        assert record.emission_level == 200.0

    def test_cannot_restart(self):
        """Test starting twice is refused."""
        record = EmissionTest(vehicle_id="Vehicle_1")
        record.mark_in_progress()

        with pytest.raises(TestStateError):
            record.mark_in_progress()

    def test_state_values(self):
        """Test the state names."""
        assert TestState.PENDING.value == "Pending"
        assert TestState.IN_PROGRESS.value == "InProgress"
        assert TestState.COMPLETED.value == "Completed"
        assert len(TestState) == 3

    @pytest.mark.parametrize("name, value", [
        ("compliance_status", True),
        ("state", TestState.PENDING),
        ("emission_level", 0.0),
        ("legal_limit", 1000.0),
    ])
    def test_completed_fields_read_only(self, name, value):
        """Test a COMPLETED record's verdict can't be assigned directly."""
        record = EmissionTest(vehicle_id="Vehicle_1")
        record.mark_in_progress()
        record.complete(False, 200.0, 180.0)

        with pytest.raises(TestStateError):
            setattr(record, name, value)

        assert record.state is TestState.COMPLETED
        assert record.compliance_status is False
        assert record.emission_level == 200.0
        assert record.legal_limit == 180.0

    def test_state_not_assignable_before_completion(self):
        """Test a PENDING record can't be pushed straight to COMPLETED."""
        record = EmissionTest(vehicle_id="Vehicle_1")

        with pytest.raises(TestStateError):
            record.state = TestState.COMPLETED

        assert record.state is TestState.PENDING

    def test_state_not_accepted_at_construction(self):
        """Test a record can't be created already COMPLETED."""
        from pydantic import ValidationError

        with pytest.raises(ValidationError):
            EmissionTest(vehicle_id="Vehicle_1", state=TestState.COMPLETED, compliance_status=True)

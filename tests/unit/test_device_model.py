"""
Unit tests for the Device domain model.
"""
from datetime import datetime, timezone

import pytest

from device_manager.domain.exceptions import DeviceValidationError, ErrorKind
from device_manager.domain.models.device import Device, DeviceState


class TestDeviceConstruction:
    """Tests for Device.__post_init__ validations"""

    def test_defaults_to_available(self):
        device = Device(id=None, name="Pixel", brand="Google")
        assert device.state == DeviceState.AVAILABLE
        assert device.creation_time is None
        assert not device.is_in_use()

    def test_state_string_is_coerced(self):
        device = Device(id="1", name="Pixel", brand="Google", state="IN_USE")
        assert device.state is DeviceState.IN_USE
        assert device.is_in_use()

    def test_blank_name_rejected(self):
        with pytest.raises(DeviceValidationError, match="Name cannot be blank"):
            Device(id=None, name="   ", brand="Google")

    def test_blank_brand_rejected(self):
        with pytest.raises(DeviceValidationError, match="Brand cannot be blank"):
            Device(id=None, name="Pixel", brand="")

    def test_non_string_name_rejected(self):
        with pytest.raises(DeviceValidationError, match="Name must be a string"):
            Device(id=None, name=None, brand="Google")

    def test_unknown_state_rejected(self):
        with pytest.raises(DeviceValidationError, match="Invalid device state 'BROKEN'"):
            Device(id=None, name="Pixel", brand="Google", state="BROKEN")

    def test_values_are_not_trimmed(self):
        device = Device(id=None, name=" Pixel ", brand="Google")
        assert device.name == " Pixel "

    def test_validation_error_is_value_error(self):
        with pytest.raises(ValueError):
            Device(id=None, name="", brand="Google")


class TestDeviceSetters:
    """Tests for the update_* methods"""

    def _device(self) -> Device:
        return Device(
            id="1",
            name="Pixel",
            brand="Google",
            creation_time=datetime(2024, 1, 1, tzinfo=timezone.utc),
        )

    def test_update_name(self):
        device = self._device()
        device.update_name("Pixel 8")
        assert device.name == "Pixel 8"

    def test_update_brand_blank_rejected(self):
        device = self._device()
        with pytest.raises(DeviceValidationError) as exc_info:
            device.update_brand(" ")
        assert exc_info.value.kind == ErrorKind.VALIDATION
        assert device.brand == "Google"

    def test_update_state_accepts_string(self):
        device = self._device()
        device.update_state("INACTIVE")
        assert device.state == DeviceState.INACTIVE

    def test_update_state_invalid_keeps_previous(self):
        device = self._device()
        with pytest.raises(DeviceValidationError, match="Allowed values: AVAILABLE, IN_USE, INACTIVE"):
            device.update_state("RETIRED")
        assert device.state == DeviceState.AVAILABLE

import pytest

from slstatus.components.temperature import temp


def test_millidegrees(tmp_path):
    sensor = tmp_path / "temp"
    sensor.write_text("45000\n")
    assert temp(str(sensor)) == "45"


@pytest.mark.parametrize("degrees", [0, 7, 38, 99, 120])
def test_fraction_is_dropped(tmp_path, degrees):
    sensor = tmp_path / "temp"
    sensor.write_text(f"{degrees * 1000 + 999}\n")
    assert temp(str(sensor)) == str(degrees)


def test_garbage(tmp_path):
    sensor = tmp_path / "temp"
    sensor.write_text("hot\n")
    assert temp(str(sensor)) is None


def test_missing_file(tmp_path):
    assert temp(str(tmp_path / "absent")) is None
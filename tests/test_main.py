"""End-to-end tests for the command entry point with a fake mapping provider."""

from datetime import timedelta
from pathlib import Path
from unittest.mock import patch

import pytest

from commuter.domain.errors import ProviderConstructionError
from commuter.domain.models import TravelMode
from commuter.main import main
from tests.fakes import FakeRouter, ScriptedLineReader


@pytest.fixture(autouse=True)
def storage_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> Path:
    """Point storage at a temporary directory."""
    monkeypatch.setenv("COMMUTER_STORAGE_DIR", str(tmp_path))
    monkeypatch.delenv("COMMUTER_LOG_LEVEL", raising=False)
    monkeypatch.delenv("COMMUTER_REQUEST_TIMEOUT_SECONDS", raising=False)
    return tmp_path


@pytest.fixture
def router() -> FakeRouter:
    """Create the fake router main builds instead of the Google Maps one."""
    return FakeRouter(
        durations={
            TravelMode.DRIVE: timedelta(minutes=25),
            TravelMode.WALK: timedelta(hours=1, minutes=30),
        }
    )


async def _configure(api_key: str = "test-key") -> int:
    with patch("commuter.main.StdinLineReader", return_value=ScriptedLineReader(api_key)):
        return await main([])


@pytest.mark.asyncio
async def test_first_run_configures(
    storage_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given no stored configuration, when running with commute flags, then the API key is asked for."""
    with patch("commuter.main.StdinLineReader", return_value=ScriptedLineReader("abc")):
        status = await main(["-to", "work"])

    assert status == 0
    assert (storage_dir / "config.json").exists()
    assert "Configuration saved." in capsys.readouterr().out


@pytest.mark.asyncio
async def test_add_then_list(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a configured tool, when adding a location and listing, then it is shown."""
    await _configure()
    capsys.readouterr()

    assert await main(["add", "-name", "home", "-location", "123 Main St."]) == 0
    assert await main(["list"]) == 0

    out = capsys.readouterr().out
    assert "home: 123 Main St." in out


@pytest.mark.asyncio
async def test_add_without_name_fails_validation(
    storage_dir: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given add without a name, when running, then an error is printed and nothing is saved."""
    await _configure()

    status = await main(["add", "-location", "123 Main St."])

    assert status == 1
    assert "missing required field: name" in capsys.readouterr().err
    assert not (storage_dir / "locations.json").exists()


@pytest.mark.asyncio
async def test_commute_uses_saved_aliases(
    router: FakeRouter, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given saved aliases, when commuting by alias, then the stored addresses are used."""
    await _configure()
    await main(["add", "-name", "home", "-location", "123 Main St."])
    await main(["add", "-name", "work", "-location", "1 Office Park"])
    capsys.readouterr()

    with patch("commuter.main.GoogleMapsRouter", return_value=router):
        status = await main(["-from", "home", "-to", "work", "-drive", "-walk"])

    assert status == 0
    assert router.calls == [
        ("123 Main St.", "1 Office Park", TravelMode.DRIVE),
        ("123 Main St.", "1 Office Park", TravelMode.WALK),
    ]
    assert capsys.readouterr().out.splitlines() == ["Drive: 25 mins", "Walk: 1 hour 30 mins"]


@pytest.mark.asyncio
async def test_conflicting_flags_are_reported(
    router: FakeRouter, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given -from with -from-current, when running, then a conflict error is printed."""
    await _configure()

    with patch("commuter.main.GoogleMapsRouter", return_value=router):
        status = await main(["-from", "home", "-from-current", "-to", "work"])

    assert status == 1
    assert "-from and -from-current cannot be used together" in capsys.readouterr().err
    assert router.calls == []


@pytest.mark.asyncio
async def test_invalid_api_key_is_reported(capsys: pytest.CaptureFixture[str]) -> None:
    """Given an empty stored API key, when commuting, then the construction error is printed."""
    await _configure("   ")

    status = await main(["-to", "work"])

    assert status == 1
    assert "API key is required" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_router_built_from_stored_key(router: FakeRouter) -> None:
    """Given a stored API key, when commuting, then the router is built with it."""
    await _configure("stored-key")

    with patch("commuter.main.GoogleMapsRouter", return_value=router) as factory:
        await main(["-to", "work"])

    assert factory.call_args.args[0] == "stored-key"


@pytest.mark.asyncio
async def test_router_construction_error_class(capsys: pytest.CaptureFixture[str]) -> None:
    """Given a router that cannot be built, when commuting, then the process status is 1."""
    await _configure()

    with patch(
        "commuter.main.GoogleMapsRouter", side_effect=ProviderConstructionError("bad key")
    ):
        status = await main(["-to", "work"])

    assert status == 1
    assert "Error: bad key" in capsys.readouterr().err


@pytest.mark.asyncio
async def test_invalid_settings_exit_non_zero(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given an invalid setting, when running, then the status is 1."""
    monkeypatch.setenv("COMMUTER_REQUEST_TIMEOUT_SECONDS", "-1")

    assert await main(["list"]) == 1


@pytest.mark.asyncio
async def test_commute_keyword_runs_commute(
    router: FakeRouter, capsys: pytest.CaptureFixture[str]
) -> None:
    """Given the commute keyword, when running, then driving to the destination is reported."""
    await _configure()
    capsys.readouterr()

    with patch("commuter.main.GoogleMapsRouter", return_value=router):
        status = await main(["commute", "-to", "work"])

    assert status == 0
    assert router.calls == [("default", "work", TravelMode.DRIVE)]
    assert capsys.readouterr().out.splitlines() == ["Drive: 25 mins"]

import pytest

from board import main


class _RecordingEngine:
    def __init__(self) -> None:
        self.disposed = False

    async def dispose(self) -> None:
        self.disposed = True


@pytest.mark.asyncio
async def test_lifespan_disposes_engine_when_app_fails(monkeypatch):
    engine = _RecordingEngine()
    monkeypatch.setattr(main, "engine", engine)
    monkeypatch.setattr(main.settings, "CREATE_SCHEMA", False)

    with pytest.raises(RuntimeError):
        async with main.lifespan(main.app):
            raise RuntimeError("serving failed")

    assert engine.disposed

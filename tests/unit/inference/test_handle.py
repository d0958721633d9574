"""Tests for the single-flight classifier handle."""

import asyncio
import threading

import pytest
from tabsense_ml.errors import ModelLoadError
from tabsense_ml.inference import ClassifierHandle

from tests.shared.fixtures import FakeZeroShotModel


class CountingLoader:
    """Loader that blocks until released and counts invocations."""

    def __init__(self, fail_times: int = 0):
        self.calls = 0
        self.release = threading.Event()
        self._fail_times = fail_times

    def __call__(self) -> FakeZeroShotModel:
        self.calls += 1
        self.release.wait(timeout=5)
        if self.calls <= self._fail_times:
            msg = "weights not found"
            raise OSError(msg)
        return FakeZeroShotModel()


class TestSingleFlight:
    @pytest.mark.asyncio
    async def test_concurrent_callers_share_one_load(self) -> None:
        loader = CountingLoader()
        handle = ClassifierHandle(loader, model_name="fake")

        waiters = [asyncio.create_task(handle.get()) for _ in range(5)]
        await asyncio.sleep(0.05)
        assert handle.is_loading
        loader.release.set()
        models = await asyncio.gather(*waiters)

        assert loader.calls == 1
        assert all(model is models[0] for model in models)
        assert handle.is_loaded
        assert not handle.is_loading

    @pytest.mark.asyncio
    async def test_loaded_model_is_reused(self) -> None:
        loader = CountingLoader()
        loader.release.set()
        handle = ClassifierHandle(loader)

        first = await handle.get()
        second = await handle.get()

        assert first is second
        assert loader.calls == 1

    @pytest.mark.asyncio
    async def test_failure_reaches_every_waiter_and_resets(self) -> None:
        loader = CountingLoader(fail_times=1)
        handle = ClassifierHandle(loader, model_name="fake")

        waiters = [asyncio.create_task(handle.get()) for _ in range(3)]
        await asyncio.sleep(0.05)
        loader.release.set()
        outcomes = await asyncio.gather(*waiters, return_exceptions=True)

        assert all(isinstance(o, ModelLoadError) for o in outcomes)
        assert all(o is outcomes[0] for o in outcomes)
        assert "weights not found" in str(outcomes[0])
        assert not handle.is_loaded
        assert not handle.is_loading

        # Next call retries
        model = await handle.get()
        assert model is not None
        assert loader.calls == 2

    @pytest.mark.asyncio
    async def test_cancelled_waiter_does_not_cancel_load(self) -> None:
        loader = CountingLoader()
        handle = ClassifierHandle(loader)

        owner = asyncio.create_task(handle.get())
        await asyncio.sleep(0.05)
        waiter = asyncio.create_task(handle.get())
        await asyncio.sleep(0.01)
        waiter.cancel()
        loader.release.set()

        assert await owner is not None
        with pytest.raises(asyncio.CancelledError):
            await waiter
        assert handle.is_loaded

    @pytest.mark.asyncio
    async def test_cancelled_initiator_does_not_cancel_load(self) -> None:
        loader = CountingLoader()
        handle = ClassifierHandle(loader)

        initiator = asyncio.create_task(handle.get())
        await asyncio.sleep(0.05)
        waiter = asyncio.create_task(handle.get())
        await asyncio.sleep(0.01)
        initiator.cancel()
        with pytest.raises(asyncio.CancelledError):
            await initiator
        assert handle.is_loading

        loader.release.set()
        model = await waiter

        assert await handle.get() is model
        assert loader.calls == 1
        assert handle.is_loaded


class TestPreloaded:
    @pytest.mark.asyncio
    async def test_from_model(self) -> None:
        model = FakeZeroShotModel(model_name="preloaded")
        handle = ClassifierHandle.from_model(model)

        assert handle.is_loaded
        assert handle.model_name == "preloaded"
        assert await handle.get() is model

    @pytest.mark.asyncio
    async def test_warmup_runs_each_dimension(self) -> None:
        model = FakeZeroShotModel()
        handle = ClassifierHandle.from_model(model)

        await handle.warmup()

        assert len(model.calls) == 3

    @pytest.mark.asyncio
    async def test_reset_forgets_model(self) -> None:
        handle = ClassifierHandle.from_model(FakeZeroShotModel())

        handle.reset()

        assert not handle.is_loaded

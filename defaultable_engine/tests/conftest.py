import sys
from pathlib import Path

# -------------------------------------------------------------------
# Make the project dir importable BEFORE importing any project packages.
# -------------------------------------------------------------------
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest  # noqa: E402

from defaultable_engine.models.context import RequestContext  # noqa: E402
from defaultable_engine.runtime.config import DefaultableConfig  # noqa: E402
from defaultable_engine.runtime.keys import CacheKeyDeriver  # noqa: E402
from defaultable_engine.runtime.recorder import LastValueRecorder  # noqa: E402
from defaultable_engine.runtime.resolver import DefaultResolver  # noqa: E402
from defaultable_engine.runtime.store import LastValueStore  # noqa: E402
from defaultable_engine.testing.stubs import RecordingCache  # noqa: E402


@pytest.fixture
def config() -> DefaultableConfig:
    return DefaultableConfig()


@pytest.fixture
def cache() -> RecordingCache:
    return RecordingCache()


@pytest.fixture
def store(cache: RecordingCache, config: DefaultableConfig) -> LastValueStore:
    return LastValueStore(cache, config.ttl_seconds)


@pytest.fixture
def keys(config: DefaultableConfig) -> CacheKeyDeriver:
    return CacheKeyDeriver(config)


@pytest.fixture
def resolver(store: LastValueStore, keys: CacheKeyDeriver, config: DefaultableConfig) -> DefaultResolver:
    return DefaultResolver(store, keys=keys, config=config)


@pytest.fixture
def recorder(store: LastValueStore, keys: CacheKeyDeriver, config: DefaultableConfig) -> LastValueRecorder:
    return LastValueRecorder(store, keys=keys, config=config)


@pytest.fixture
def create_ctx() -> RequestContext:
    return RequestContext.create("posts", principal_id="U1")


@pytest.fixture
def update_ctx() -> RequestContext:
    return RequestContext.update("posts", principal_id="U1")

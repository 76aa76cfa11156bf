"""Test environment factory.

``TestFactory`` builds the collaborators a test suite needs (an
:class:`~envfactory.http.client.APIClient`, an
:class:`~envfactory.objects.manager.ObjectManager` and an
:class:`~envfactory.storage.store.ObjectStore`) and resets process-wide state
around each test.

Typical usage from a test suite::

    from envfactory import facade

    def setup_function():
        facade.set_up()

    def teardown_function():
        facade.tear_down()

    def test_loads_user():
        manager = facade.build_object_manager()
        ...

``set_up()`` and ``tear_down()`` both clear the shared client, the shared
object manager and the default object store. ``set_up()`` additionally wipes
the response cache directory. Applications customize the lifecycle through
:class:`~envfactory.hooks.FactoryCallbacks` or hooks registered with
:func:`~envfactory.hooks.register_hook`.
"""

import shutil
import threading

import httpx
import structlog

from envfactory.config.factory import (
    ClientFactory,
    FactoryConfiguration,
    ManagerFactory,
)
from envfactory.config.settings import FactorySettings
from envfactory.core.errors import ConfigurationError
from envfactory.hooks import FactoryCallbacks, HookEvent, HookManager, HookRegistry
from envfactory.http.client import APIClient, reset_shared_client
from envfactory.objects.manager import ObjectManager, reset_shared_manager
from envfactory.storage.store import ObjectStore, reset_default_store


logger = structlog.get_logger(__name__)


class TestFactory:
    """Builds test collaborators and drives the set-up/tear-down cycle."""

    __test__ = False  # not a pytest test class

    def __init__(
        self,
        configuration: FactoryConfiguration | None = None,
        *,
        settings: FactorySettings | None = None,
        callbacks: FactoryCallbacks | None = None,
        hook_registry: HookRegistry | None = None,
        initialize: bool = True,
    ) -> None:
        """Create a factory and, unless told otherwise, fire ``on_initialize``.

        Args:
            configuration: Construction settings; defaults are derived from
                ``settings`` when omitted
            settings: Environment-driven settings (store and cache paths)
            callbacks: Lifecycle callbacks; no-op callbacks when omitted
            hook_registry: Registry of extra hooks; the global registry when
                omitted
            initialize: Fire ``on_initialize`` now; pass False to defer it to
                an explicit :meth:`initialize` call
        """
        self.settings = settings or FactorySettings()
        self.configuration = configuration or FactoryConfiguration(
            base_url=self.settings.base_url
        )
        self._hooks = HookManager(callbacks or FactoryCallbacks(), hook_registry)
        self._is_set_up = False
        self._initialized = False

        if initialize:
            self.initialize()

    def initialize(self) -> None:
        """Fire ``on_initialize``. Only the first call has any effect."""
        if self._initialized:
            return
        self._initialized = True

        logger.debug(
            "test_factory_initialized",
            base_url=self.configuration.base_url,
            category="lifecycle",
        )
        self._hooks.emit(HookEvent.FACTORY_INITIALIZED)

    # Configuration

    @property
    def callbacks(self) -> FactoryCallbacks:
        return self._hooks.callbacks

    @callbacks.setter
    def callbacks(self, callbacks: FactoryCallbacks) -> None:
        self._hooks.callbacks = callbacks

    @property
    def base_url(self) -> str:
        """The configured base URL, exactly as it was set."""
        return self.configuration.base_url

    @base_url.setter
    def base_url(self, url: str | httpx.URL) -> None:
        if url is None:
            raise ConfigurationError("base_url must not be None")
        self.configuration.base_url = str(url)

    @property
    def parsed_base_url(self) -> httpx.URL:
        """The configured base URL parsed into an :class:`httpx.URL`.

        Raises :class:`httpx.InvalidURL` when the stored value cannot be parsed.
        """
        return httpx.URL(self.configuration.base_url)

    @property
    def client_factory(self) -> ClientFactory:
        return self.configuration.client_factory

    @client_factory.setter
    def client_factory(self, factory: ClientFactory) -> None:
        if factory is None:
            raise ConfigurationError("client_factory must not be None")
        self.configuration.client_factory = factory

    @property
    def manager_factory(self) -> ManagerFactory:
        return self.configuration.manager_factory

    @manager_factory.setter
    def manager_factory(self, factory: ManagerFactory) -> None:
        if factory is None:
            raise ConfigurationError("manager_factory must not be None")
        self.configuration.manager_factory = factory

    # Builders

    def build_client(self) -> APIClient:
        """Create a client for the configured base URL.

        Errors raised by the client constructor propagate unchanged.
        """
        client = self.configuration.client_factory(self.configuration.base_url)
        logger.debug(
            "factory_built_client",
            client_type=type(client).__name__,
            category="lifecycle",
        )
        return client

    def build_object_manager(self) -> ObjectManager:
        """Create an object manager wrapping a freshly built client."""
        manager = self.configuration.manager_factory(self.build_client())
        logger.debug(
            "factory_built_object_manager",
            manager_type=type(manager).__name__,
            category="lifecycle",
        )
        return manager

    def build_object_store(self) -> ObjectStore:
        """Create an empty object store at the configured store path.

        Any data persisted there by a previous test is deleted first.
        """
        path = self.settings.store_path
        store = ObjectStore(path)
        store.delete_persistent_store()
        logger.debug("factory_built_object_store", path=str(path), category="lifecycle")
        return store

    # Lifecycle

    @property
    def is_set_up(self) -> bool:
        return self._is_set_up

    def _clear_shared_instances(self) -> None:
        reset_shared_manager()
        reset_shared_client()
        reset_default_store()

    def _clear_cache_dir(self) -> None:
        cache_dir = self.settings.cache_dir
        if cache_dir.exists():
            shutil.rmtree(cache_dir)
            logger.debug(
                "factory_cache_cleared", path=str(cache_dir), category="lifecycle"
            )

    def set_up(self) -> None:
        """Prepare a clean environment for one test, then fire ``on_set_up``."""
        self._clear_shared_instances()
        self._clear_cache_dir()
        self._is_set_up = True
        logger.debug("factory_set_up", category="lifecycle")
        self._hooks.emit(HookEvent.FACTORY_SET_UP)

    def tear_down(self) -> None:
        """Clear shared instances, then fire ``on_tear_down``.

        Safe to call without a preceding ``set_up()`` and safe to repeat.
        """
        self._clear_shared_instances()
        self._is_set_up = False
        logger.debug("factory_torn_down", category="lifecycle")
        self._hooks.emit(HookEvent.FACTORY_TORN_DOWN)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(base_url={self.configuration.base_url!r}, "
            f"set_up={self._is_set_up})"
        )


# Shared instance management
_shared_factory: TestFactory | None = None
_shared_factory_ready = False
_default_callbacks: FactoryCallbacks | None = None
_factory_lock = threading.RLock()


def get_shared_factory() -> TestFactory:
    """Return the process-wide factory, creating it on first access.

    ``on_initialize`` fires once, when the instance is created. Other threads
    wait until it has returned. Callbacks may use the shared factory (or the
    facade) from inside ``on_initialize``.
    """
    global _shared_factory, _shared_factory_ready

    if _shared_factory is not None and _shared_factory_ready:
        return _shared_factory

    with _factory_lock:
        # Double-check after acquiring the lock; a re-entrant call from
        # on_initialize gets the published instance here
        if _shared_factory is None:
            _shared_factory = TestFactory(
                callbacks=_default_callbacks, initialize=False
            )
            logger.info("shared_test_factory_created", category="lifecycle")
            _shared_factory.initialize()
            _shared_factory_ready = True

        return _shared_factory


def set_callbacks(callbacks: FactoryCallbacks | None) -> None:
    """Install callbacks for the shared factory.

    Install before first access for ``on_initialize`` to be observed. The
    callbacks also replace those of an already created shared factory.
    ``None`` restores the no-op callbacks.
    """
    global _default_callbacks

    _default_callbacks = callbacks
    if _shared_factory is not None:
        _shared_factory.callbacks = callbacks or FactoryCallbacks()


def reset_shared_factory() -> None:
    """Tear down and discard the shared factory.

    The next access creates a fresh instance and fires ``on_initialize``
    again. The instance is discarded even when ``on_tear_down`` raises; the
    error still propagates.
    """
    global _shared_factory, _shared_factory_ready

    with _factory_lock:
        if _shared_factory is None:
            return
        try:
            _shared_factory.tear_down()
        finally:
            _shared_factory = None
            _shared_factory_ready = False
            logger.info("shared_test_factory_reset", category="lifecycle")

"""Base services container for dependency injection."""

from config import Config
from db.manager import StorageManager
from db.ledger_store import LedgerStore
from services.ledger import LedgerService, new_id


class Services:
    """Container for all application services.

    This class provides a centralized way to access all services and makes
    it easy to inject a fake storage backend for testing.

    Args:
        config: Application configuration object.
        storage: Optional key-value storage for testing. If provided, config is
                 not used to locate the store file.
        id_factory: Optional id generator passed to the ledger service.
    """

    def __init__(self, config: Config, storage=None, id_factory=new_id):
        """Initialize services with configuration.

        The ledger is loaded once here; later reads use memory only.

        Args:
            config: Config object containing application configuration.
            storage: Optional key-value storage for dependency injection (testing).
                     If None, creates StorageManager from config.
            id_factory: Callable returning fresh unique ids.
        """
        self.config = config
        self.storage = storage or StorageManager(config)
        self.store = LedgerStore(self.storage, config.storage_key)

        self.ledger = LedgerService(self.store.load(), id_factory=id_factory)

    def persist(self) -> bool:
        """Write the current ledger snapshot to the store.

        Returns:
            True if written, False if the write failed and was dropped.
        """
        return self.store.save(self.ledger.ledger)

# data/repository.py
import json
import logging
import os
import stat
import tempfile
from pathlib import Path

logger = logging.getLogger("shopping_cart.repository")

SNAPSHOT_FORMAT = "shopping-cart"
SNAPSHOT_VERSION = 1
DEFAULT_CART_FILE = Path("data/storage/shopping_cart.json")


class SnapshotError(ValueError):
    # Raised when a cart file exists but does not hold a valid snapshot.
    pass


class CartRepository:
    """
    Reads and writes the whole cart as one JSON document:

        {"format": "shopping-cart", "version": 1,
         "items": [{"name": "Apple", "price": 1.5}, ...]}

    The repository works on plain dicts; models.cart turns them into
    Product objects.
    """

    def __init__(self, path: str | Path = DEFAULT_CART_FILE):
        self.path = Path(path)

    def _read_json(self):
        with open(self.path, "r", encoding="utf-8") as f:
            text = f.read()
        try:
            return json.loads(text)
        except (json.JSONDecodeError, RecursionError) as e:
            raise SnapshotError(f"not valid JSON ({e})") from e

    def _write_json(self, data) -> None:
        # Write next to the target, then swap it in with one rename,
        # so a failed write never leaves a half-written cart file.
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self.path.parent, prefix=f".{self.path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            self._keep_mode(tmp_name)
            os.replace(tmp_name, self.path)
        except Exception:
            try:
                os.unlink(tmp_name)
            except OSError:
                pass
            raise

    def _keep_mode(self, tmp_name: str) -> None:
        # mkstemp creates 0600 files; an existing cart file keeps its own mode
        try:
            mode = stat.S_IMODE(os.stat(self.path).st_mode)
        except FileNotFoundError:
            return
        os.chmod(tmp_name, mode)

    @staticmethod
    def _check_snapshot(data) -> list[dict]:
        if not isinstance(data, dict):
            raise SnapshotError("top level is not an object")
        if data.get("format") != SNAPSHOT_FORMAT:
            raise SnapshotError(f"unknown format {data.get('format')!r}")
        if data.get("version") != SNAPSHOT_VERSION:
            raise SnapshotError(f"unsupported version {data.get('version')!r}")

        items = data.get("items")
        if not isinstance(items, list):
            raise SnapshotError("'items' is not a list")

        for pos, item in enumerate(items):
            if not isinstance(item, dict):
                raise SnapshotError(f"item {pos} is not an object")
            if not isinstance(item.get("name"), str):
                raise SnapshotError(f"item {pos} has no text 'name'")
            price = item.get("price")
            # bool is an int subclass, reject it explicitly
            if isinstance(price, bool) or not isinstance(price, (int, float)):
                raise SnapshotError(f"item {pos} has no numeric 'price'")
        return items

    def save_items(self, items: list[dict]) -> None:
        # Replace the file with a snapshot of the given item dicts.
        # OSError and encoding errors propagate to the caller.
        snapshot = {
            "format": SNAPSHOT_FORMAT,
            "version": SNAPSHOT_VERSION,
            "items": items,
        }
        self._write_json(snapshot)
        logger.info(f"saved {len(items)} item(s) to {self.path}")

    def load_items(self) -> list[dict] | None:
        # Returns the stored item dicts, or None when there is nothing
        # usable on disk. Never raises for missing/unreadable/corrupt files.
        try:
            items = self._check_snapshot(self._read_json())
        except FileNotFoundError:
            logger.info(f"no cart file at {self.path}, starting empty")
            return None
        except SnapshotError as e:
            logger.warning(f"cart file {self.path} is corrupt: {e}")
            return None
        except (OSError, UnicodeDecodeError) as e:
            logger.warning(f"cart file {self.path} is unreadable: {e}")
            return None

        logger.info(f"loaded {len(items)} item(s) from {self.path}")
        return items

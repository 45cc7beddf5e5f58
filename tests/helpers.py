"""Constants and stand-ins shared by the test modules."""

BASE = "https://enka.test/api"
UID = "618285856"


class RecordingSleep:
    """Stand-in for asyncio.sleep that records delays instead of waiting."""

    def __init__(self) -> None:
        self.delays: list[float] = []

    async def __call__(self, delay: float) -> None:
        self.delays.append(delay)


class FakeRedis:
    """Minimal stand-in for redis.asyncio.Redis."""

    def __init__(self) -> None:
        self.store: dict[str, bytes] = {}
        self.expirations: dict[str, int] = {}
        self.closed = False

    async def get(self, key: str) -> bytes | None:
        return self.store.get(key)

    async def set(self, key: str, value: bytes, px: int) -> None:
        self.store[key] = value
        self.expirations[key] = px

    async def delete(self, *keys: str) -> None:
        for key in keys:
            self.store.pop(key, None)

    async def scan(
        self, cursor: int, match: str, count: int
    ) -> tuple[int, list[str]]:
        prefix = match.rstrip("*")
        return 0, [key for key in self.store if key.startswith(prefix)]

    async def aclose(self) -> None:
        self.closed = True

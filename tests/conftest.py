"""Configuration pytest / pytest configuration.

La base de test est un fichier SQLite temporaire, fixe avant l'import de
l'application.
The test database is a temporary SQLite file, set before the app is imported.
"""

import os
import tempfile

_DB_DIR = tempfile.mkdtemp(prefix="gasoil-tests-")
os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{_DB_DIR}/test.db"
os.environ["DEBUG"] = "true"
os.environ["RATE_LIMIT_DEFAULT"] = "10000/minute"
os.environ["STATIC_DIR"] = os.path.join(_DB_DIR, "no-frontend")

import pytest  # noqa: E402
from httpx import ASGITransport, AsyncClient  # noqa: E402

from gasoil.database import drop_db, init_db  # noqa: E402
from gasoil.main import app  # noqa: E402


@pytest.fixture
async def client():
    await init_db()
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    await drop_db()

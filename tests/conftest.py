import os
import tempfile

import pytest

# Point the store at a throwaway SQLite file before anything imports core.db.base.
_DB_DIR = tempfile.mkdtemp(prefix="sarkarijob-tests-")
os.environ["DATABASE_URL"] = f"sqlite:///{os.path.join(_DB_DIR, 'test.db')}"
os.environ["SEED_SAMPLE_DATA"] = "false"

from app.security import reset_rate_limits  # noqa: E402
from core.db.base import get_conn  # noqa: E402
from core.db.schema import init_db  # noqa: E402


_TABLES = [
    "jobs",
    "results",
    "admit_cards",
    "answer_keys",
    "push_subscriptions",
]


def _truncate_all():
    conn = get_conn()
    cur = conn.cursor()
    for table in _TABLES:
        cur.execute(f"DELETE FROM {table}")
    cur.execute("DELETE FROM sqlite_sequence")
    conn.commit()
    conn.close()


@pytest.fixture(autouse=True)
def _clean_db():
    init_db(seed=False)
    _truncate_all()
    reset_rate_limits()
    yield
    _truncate_all()

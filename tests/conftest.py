# tests/conftest.py
import os, pathlib, tempfile
import pytest
from dotenv import load_dotenv

# Must happen before kbsearch is imported: config and logging read the env at import time
load_dotenv(pathlib.Path(__file__).parent / ".env.test", override=True)
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="kb_search_logs_")


@pytest.fixture()
def memory_store():
    from kbsearch.store import MemoryArticleStore
    return MemoryArticleStore()


@pytest.fixture()
def sql_store(tmp_path):
    from kbsearch.store import SqlArticleStore, make_engine
    store = SqlArticleStore(make_engine(f"sqlite:///{tmp_path / 'kb.db'}"))
    store.setup()
    return store


@pytest.fixture()
def make_article():
    from kbsearch.models import Article

    def _make(title, content, url=None, source=None):
        return Article(title=title, content=content, url=url, source=source)
    return _make


@pytest.fixture()
def seeded_store(memory_store, make_article):
    memory_store.insert(make_article("Go Basics", "intro to goroutines"))
    memory_store.insert(make_article("Rust Ownership", "borrow checker"))
    return memory_store


@pytest.fixture()
def client(memory_store):
    from fastapi.testclient import TestClient
    from kbsearch.main import create_app
    return TestClient(create_app(memory_store))

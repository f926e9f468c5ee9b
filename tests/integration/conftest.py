import bcrypt
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import TestDataLoader
from src.depends import get_background_writer, get_unit_of_work
from src.adapter.services.background_writer import QueuedBackgroundWriter
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.domain.entities import User
from config import ApplicationConfig


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
async def writer(engine):
    writer = QueuedBackgroundWriter(
        sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    )
    yield writer
    await writer.stop()


@pytest_asyncio.fixture
async def client(db_session, writer):
    from httpx import ASGITransport
    from src.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_background_writer] = lambda: writer

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
def create_user(db_session, test_data):
    """Insert one of the users from test_data.json and return it"""

    async def _create(key: str = "member") -> User:
        data = test_data.user(key)
        user = User(
            email=data["email"],
            member=data["member"],
            password_hash=bcrypt.hashpw(data["password"].encode(), bcrypt.gensalt(4)).decode(),
        )
        db_session.add(user)
        await db_session.commit()
        await db_session.refresh(user)
        return user

    return _create


@pytest_asyncio.fixture
def admin_headers():
    return {"X-Admin-API-Key": ApplicationConfig.ADMIN_API_KEY}


@pytest_asyncio.fixture
def login(client, test_data):
    """Log in through the form; cookies land in the client's jar"""

    async def _login(key: str = "member"):
        data = test_data.user(key)
        response = await client.post(
            "/login", data={"email": data["email"], "password": data["password"]}
        )
        assert response.status_code == 303
        return response

    return _login


@pytest_asyncio.fixture
def create_shortlink(client, writer, admin_headers):
    """Create a shortlink through the API and wait for the queued insert"""

    async def _create(payload: dict) -> str:
        response = await client.post("/l", json=payload, headers=admin_headers)
        assert response.status_code == 200, response.text
        await writer.join()
        return response.json()["code"]

    return _create

import os

# Must be set before the application modules read their settings
os.environ["POSTGRES_URI"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["ENV"] = "test"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["ADMIN_EMAIL"] = "admin@example.com"
os.environ["ADMIN_PASSWORD"] = "admin-secret"

import datetime as dt
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient

from database.postgres import Base, SessionLocal, configure_mappers, engine
from main import app
from models.cooperative import Cooperative, CooperativeAccount
from models.criteria import CooperativeCategory, Criteria, CriteriaField
from models.member import Member, MemberAccount
from utils.auth import hash_password

configure_mappers()

COOP_EMAIL = "coop@example.com"
COOP_PASSWORD = "coop-secret"


@pytest.fixture(autouse=True)
def reset_database():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def criteria(db):
    criteria = Criteria(
        name="Standard",
        financial_performance_points=40,
        organization_management_points=30,
        fields=[
            CriteriaField(name="Audit compliance", max_points=10, position=0),
            CriteriaField(name="Member education", max_points=20, position=1),
        ],
    )
    db.add(criteria)
    db.commit()
    return criteria


@pytest.fixture
def category(db, criteria):
    category = CooperativeCategory(name="Micro", required_assets=Decimal("100000"), criteria_id=criteria.id)
    db.add(category)
    db.commit()
    return category


def make_cooperative(db, category, email=COOP_EMAIL, name="Bayanihan Cooperative"):
    cooperative = Cooperative(
        name=name,
        registration_number="REG-001",
        registration_date=dt.date(2015, 3, 1),
        category_id=category.id,
        initials="BC",
        address="Quezon City",
    )
    cooperative.account = CooperativeAccount(
        given_name="Maria",
        middle_name="Santos",
        surname="Cruz",
        email=email,
        password=hash_password(COOP_PASSWORD),
    )
    db.add(cooperative)
    db.commit()
    return cooperative


def make_member(db, cooperative, given_name="Juan", surname="Dela Cruz", birthday=dt.date(1990, 5, 17)):
    member = Member(
        cooperative_id=cooperative.id,
        given_name=given_name,
        middle_name="Reyes",
        surname=surname,
        birthday=birthday,
        gender="Male",
        educational_attainment="College",
        civil_status="Single",
        present_address="Manila",
    )
    member.account = MemberAccount(email=f"{given_name.lower()}@example.com", mobile_number="09171234567")
    db.add(member)
    db.commit()
    return member


@pytest.fixture
def cooperative(db, category):
    return make_cooperative(db, category)


@pytest.fixture
def member(db, cooperative):
    return make_member(db, cooperative)


def login(client, path, email, password):
    return client.post(path, data={"email": email, "password": password}, follow_redirects=False)


@pytest.fixture
def coop_client(client, cooperative):
    response = login(client, "/cooperative/login", COOP_EMAIL, COOP_PASSWORD)
    assert response.status_code == 303
    return client


@pytest.fixture
def admin_client(client):
    response = login(client, "/admin/login", "admin@example.com", "admin-secret")
    assert response.status_code == 303
    return client

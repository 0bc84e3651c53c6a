import datetime as dt

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from budget_app.db.base import Base
from budget_app.db import models  # noqa: F401
from budget_app.db.models.project import Project
from budget_app.db.models.project_item import ProjectItem
from budget_app.db.models.supplier import Supplier
from budget_app.db.models.transaction import Transaction
from budget_app.schemas.reports import ReportItem


@pytest.fixture
def engine():
    eng = create_engine("sqlite:///:memory:")
    Base.metadata.create_all(eng)
    return eng


@pytest.fixture
def db(engine):
    SessionLocal = sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def seeded(db):
    """Project with two areas, one unassigned item, a supplier and mixed transactions."""
    sup = Supplier(name="Maderas del Cibao")
    p = Project(name="Apartamento Piantini", client_name="Familia Reyes")
    db.add_all([sup, p])
    db.flush()

    sofa = ProjectItem(project_id=p.id, area="Sala", category="Mobiliario", item_name="Sofá",
                       quantity=1, estimated_cost=1000, internal_cost=800, client_cost=1200, supplier_id=sup.id)
    lamp = ProjectItem(project_id=p.id, area="Sala", category="Iluminación", item_name="Lámpara",
                       quantity=2, estimated_cost=150, internal_cost=None, client_cost=200)
    table = ProjectItem(project_id=p.id, area="Cocina", category="Mobiliario", item_name="Mesa",
                        quantity=1, estimated_cost=500, internal_cost=450, client_cost=None)
    misc = ProjectItem(project_id=p.id, area=None, category="Otros", item_name="Flete",
                       quantity=1, estimated_cost=None, internal_cost=None, client_cost=None)
    db.add_all([sofa, lamp, table, misc])
    db.flush()

    d = dt.date(2025, 3, 1)
    db.add_all([
        Transaction(project_id=p.id, project_item_id=sofa.id, amount=800, client_facing_amount=600, date=d),
        Transaction(project_id=p.id, project_item_id=sofa.id, amount=100, client_facing_amount=None, date=d),
        Transaction(project_id=p.id, project_item_id=lamp.id, amount=300, client_facing_amount=350, date=d),
        Transaction(project_id=p.id, project_item_id=None, amount=-2000, client_facing_amount=-2000, date=d),
        Transaction(project_id=p.id, project_item_id=sofa.id, amount=-500, client_facing_amount=-500, date=d),
    ])
    db.commit()
    return {"project": p, "supplier": sup, "sofa": sofa, "lamp": lamp, "table": table, "misc": misc}


@pytest.fixture
def report_rows():
    return [
        ReportItem(item_id=1, area="Sala", category="Mobiliario", item_name="Sofá",
                   estimated_cost=1000, actual_cost=1200, amount_paid=600, internal_amount_paid=900, pending_to_pay=600),
        ReportItem(item_id=2, area="Cocina", category="Mobiliario", item_name="Mesa",
                   estimated_cost=500, actual_cost=None, amount_paid=0, internal_amount_paid=0, pending_to_pay=0),
        ReportItem(item_id=3, area=None, category="Otros", item_name="Flete", estimated_cost=None),
        ReportItem(item_id=4, area="Sala", category="Iluminación", item_name="Lámpara",
                   estimated_cost=300, actual_cost=400, amount_paid=350, internal_amount_paid=300, pending_to_pay=50),
        ReportItem(item_id=5, area="", category="Otros", item_name="Limpieza", estimated_cost=75, actual_cost=90),
    ]

# import all models so Base.metadata is complete
from budget_app.db.models.project import Project
from budget_app.db.models.supplier import Supplier
from budget_app.db.models.project_item import ProjectItem
from budget_app.db.models.transaction import Transaction

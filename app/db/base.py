from sqlalchemy.orm import declarative_base

Base = declarative_base()

# Note: models live in app.db.models and must import Base from this module

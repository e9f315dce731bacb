from sqlalchemy import Column, Integer, String, Text, UniqueConstraint

from backend.app.db.base_class import Base


class WebsiteContent(Base):
    __tablename__ = "website_content"
    __table_args__ = (UniqueConstraint("section", "key", name="uq_website_content_section_key"),)

    id = Column(Integer, primary_key=True, index=True)
    section = Column(String(64), nullable=False, index=True)
    key = Column(String(128), nullable=False)
    value = Column(Text, nullable=True)
    sort_order = Column(Integer, nullable=False, default=0)

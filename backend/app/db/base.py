from backend.app.db.base_class import Base

# Import models to register metadata for Base.metadata.create_all in tests
from backend.app.models.user import User  # noqa: F401
from backend.app.models.office_settings import OfficeSettings  # noqa: F401
from backend.app.models.invoice import Invoice  # noqa: F401
from backend.app.models.invoice_item import InvoiceItem  # noqa: F401
from backend.app.models.contact_message import ContactMessage  # noqa: F401
from backend.app.models.website_content import WebsiteContent  # noqa: F401

from pathlib import Path

from fastapi.templating import Jinja2Templates

BASE_DIR = Path(__file__).resolve().parent

# Parsed once per process and shared read-only by every request.
templates = Jinja2Templates(directory=str(BASE_DIR / "templates"))

FORM_TEMPLATE = "form.html"

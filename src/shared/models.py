from src.core.utils.utils import import_app_modules

# Register every app's table models on the SQLModel metadata
import_app_modules("models")

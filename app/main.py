from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

# ✅ Import All API Routes
from app.api.routes import health, filters, translations, settings, companies

# ✅ Import Core Services
from app.core.config import AppConfig
from app.core.i18n import i18n, init_i18n
from app.core.logger import AppLogger
from app.core.logging_config import setup_logging
from app.services.settings_service import JsonFileSettingsStorage, SettingsContext


# ============================================
# ✅ CONFIG (resolved once)
# ============================================

app_config = AppConfig.from_env()
setup_logging(app_config)
logger = AppLogger.from_config(__name__, app_config)


# ============================================
# ✅ FASTAPI APP INIT
# ============================================

app = FastAPI(title="Content Platform API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        "http://localhost:3000",      # local frontend
        "http://127.0.0.1:3000",
    ],
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "PATCH"],
    allow_headers=["Authorization", "Content-Type"],
)

# ✅ Application-owned state
app.state.settings_context = SettingsContext(JsonFileSettingsStorage(app_config.settings_file))
init_i18n(i18n, default_language=app_config.default_language)


# ============================================
# ✅ REGISTER ALL ROUTERS
# ============================================

app.include_router(health.router)
app.include_router(filters.router)
app.include_router(translations.router)
app.include_router(settings.router)
app.include_router(companies.router)

logger.info(f"Content Platform API started ({app_config.app_env})")


# ============================================
# ✅ ROOT ENDPOINT
# ============================================

@app.get("/")
def root():
    return {"status": "Content Platform API running"}

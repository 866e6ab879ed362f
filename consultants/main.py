# consultants/main.py

from fastapi import FastAPI
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException

from consultants import config
from consultants.api.people import router as people_router

app = FastAPI(
    title="Consultant Directory",
    version="0.1.0",
)


@app.exception_handler(StarletteHTTPException)
async def plain_text_http_error(request, exc: StarletteHTTPException):
    # Error bodies are plain text, never JSON or HTML
    return PlainTextResponse(str(exc.detail), status_code=exc.status_code, headers=exc.headers)


@app.get("/health")
def health_check():
    return {"status": "ok"}


app.include_router(people_router)

# Mounted last so the routes above take precedence
app.mount("/", StaticFiles(directory=config.STATIC_DIR), name="public")

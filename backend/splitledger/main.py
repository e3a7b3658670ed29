"""FastAPI app entrypoint."""
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from splitledger.config import ALLOWED_ORIGINS, configure_logging
from splitledger.routers import expenses, settlements

configure_logging()

app = FastAPI(
    title="Split Ledger API",
    description="Split shared expenses, work out net balances and who pays whom to settle up.",
    version="1.0.0",
)
app.add_middleware(
    CORSMiddleware,
    allow_origins=ALLOWED_ORIGINS,
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(expenses.router, prefix="/api")
app.include_router(settlements.router, prefix="/api")


@app.get("/")
def root():
    return {"message": "Split Ledger API", "docs": "/docs"}

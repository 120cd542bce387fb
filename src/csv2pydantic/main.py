from fastapi import FastAPI, HTTPException

from csv2pydantic.observability.logger import log_event
from csv2pydantic.router import route
from csv2pydantic.utils.exceptions import Csv2PydanticError

app = FastAPI(
    title="CSV to Pydantic Model Generator",
    version="1.0.0"
)


@app.post("/generate-model")
def generate_model(payload: dict):
    try:
        return route(payload)
    except Csv2PydanticError as e:
        # Bad input, not a server fault
        log_event("REQUEST_FAILED", {"error": type(e).__name__, "message": str(e)})
        raise HTTPException(
            status_code=422,
            detail={
                "status": "ERROR",
                "error": type(e).__name__,
                "message": str(e),
            }
        )

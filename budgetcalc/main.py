import logging
import time

import uvicorn
from fastapi import FastAPI, HTTPException
from fastapi.responses import Response
from prometheus_client import generate_latest, CONTENT_TYPE_LATEST

from budgetcalc.budget import Budget
from budgetcalc.config import Settings
from budgetcalc.discounts import DEFAULT_CHAIN
from budgetcalc.metrics import REQUESTS, RULE_HITS, LATENCY
from budgetcalc.taxes import TaxKind, calculate_tax

settings = Settings.from_env()
logging.basicConfig(level=settings.log_level, format="%(asctime)s %(name)s %(levelname)s %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.title)


def _budget(payload: dict) -> Budget:
    return Budget(total_value=payload.get("total", 0), item_count=payload.get("items", 0))


@app.get("/health")
def health():
    return {"status":"ok"}

@app.post("/discount")
def discount(payload: dict):
    t0 = time.time()
    status = "200"
    try:
        budget = _budget(payload)
        rule, amount = DEFAULT_CHAIN.apply(budget)
        RULE_HITS.labels(rule.name if rule else "none").inc()
        logger.debug("discount %s -> %s (%s)", budget, amount, rule.name if rule else "none")
        return {"discount": amount, "rule": rule.name if rule else None}
    except ValueError as exc:
        status = "400"
        logger.warning("rejected /discount payload %r: %s", payload, exc)
        raise HTTPException(status_code=400, detail=str(exc))
    finally:
        LATENCY.observe(time.time() - t0)
        REQUESTS.labels("/discount","POST",status).inc()

@app.post("/tax")
def tax(payload: dict):
    t0 = time.time()
    status = "200"
    try:
        budget = _budget(payload)
        kind = TaxKind.parse(payload.get("tax", ""))
        amount = calculate_tax(budget, kind)
        logger.debug("tax %s %s -> %s", kind.value, budget, amount)
        return {"tax": kind.value, "amount": amount}
    except ValueError as exc:
        status = "400"
        logger.warning("rejected /tax payload %r: %s", payload, exc)
        raise HTTPException(status_code=400, detail=str(exc))
    finally:
        LATENCY.observe(time.time() - t0)
        REQUESTS.labels("/tax","POST",status).inc()

@app.get("/metrics")
def metrics():
    return Response(generate_latest(), media_type=CONTENT_TYPE_LATEST)


def serve():
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    serve()

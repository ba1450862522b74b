"""
FastAPI REST API for the Elasticsearch to Typesense transformer.

Translates Elasticsearch search requests into Typesense search parameters.
"""

import os
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv
from fastapi import FastAPI, HTTPException
from pydantic import BaseModel, Field

from elastic_to_typesense import QueryTransformer
from elastic_to_typesense.config import configure_logging, load_options_from_env
from elastic_to_typesense.core.models import ElasticSchema, TypesenseSchema

load_dotenv()
configure_logging()

app = FastAPI(
    title="Elasticsearch to Typesense API",
    description="Translate Elasticsearch search requests to Typesense search parameters",
    version="1.0.0",
)


class TransformRequest(BaseModel):
    """Request model for a query translation."""
    query: Dict[str, Any] = Field(..., description="Elasticsearch search request body")
    property_mapping: Optional[Dict[str, str]] = Field(
        None, description="Extra Elasticsearch -> Typesense field mappings"
    )
    typesense_schema: Optional[TypesenseSchema] = Field(None, description="Typesense collection schema")
    elastic_schema: Optional[ElasticSchema] = Field(None, description="Elasticsearch index mapping")
    default_score_field: Optional[str] = Field(None, description="Sort expression for _score")


class TransformResponse(BaseModel):
    """Response model for a query translation."""
    query: Dict[str, Any]
    warnings: List[str]


def get_transformer(request: TransformRequest) -> QueryTransformer:
    """Environment-configured transformer extended with per-request options."""
    base = QueryTransformer(load_options_from_env())
    overrides: Dict[str, Any] = {}
    if request.property_mapping:
        overrides["property_mapping"] = request.property_mapping
    if request.typesense_schema is not None:
        overrides["typesense_schema"] = request.typesense_schema
    if request.elastic_schema is not None:
        overrides["elastic_schema"] = request.elastic_schema
    if request.default_score_field:
        overrides["default_score_field"] = request.default_score_field
    return base.extend(**overrides) if overrides else base


@app.get("/health")
async def health():
    return {"status": "ok"}


@app.post("/transform", response_model=TransformResponse)
async def transform_query(request: TransformRequest):
    """
    Translate an Elasticsearch search request.

    Warnings list the parts of the request that could not be translated.
    """
    try:
        transformer = get_transformer(request)
        outcome = transformer.transform(request.query)
    except Exception as e:
        raise HTTPException(status_code=500, detail=f"Query translation failed: {str(e)}")

    if not outcome.ok:
        raise HTTPException(status_code=400, detail=outcome.error)

    return TransformResponse(
        query=outcome.value.query.to_params(),
        warnings=outcome.value.warnings,
    )


if __name__ == "__main__":
    import uvicorn

    port = int(os.getenv("API_PORT", "8000"))
    host = os.getenv("API_HOST", "0.0.0.0")

    uvicorn.run(app, host=host, port=port)

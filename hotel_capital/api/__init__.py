"""
HTTP surface for the decision engines.

`create_api` builds the FastAPI app; `schema` holds the serialisation
helpers shared with the CLI.
"""

from .schema import serialize, serialize_compliance_result, serialize_score

__all__ = ["serialize", "serialize_compliance_result", "serialize_score"]

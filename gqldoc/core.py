"""Core gqldoc implementation."""

from pathlib import Path
from typing import Any, Optional, List, Union
import logging

from fastapi import FastAPI, HTTPException
from fastapi.responses import PlainTextResponse
import uvicorn

from .exceptions import SchemaError
from .generation import DocumentBuilder, OperationDoc
from .schema import load_schema
from .validation import ExampleQueryChecker

logger = logging.getLogger(__name__)

MARKDOWN_MEDIA_TYPE = "text/markdown; charset=utf-8"


class GQLDoc:
    """Main gqldoc class for generating reference documentation from GraphQL schemas."""

    def __init__(self,
                 schema: Any,
                 endpoint: str = "http://host:port/graphql",
                 method: str = "POST",
                 title: str = "API Reference",
                 introduction: Optional[str] = None,
                 include_mutations: bool = False,
                 strict: bool = False,
                 validate_examples: bool = True,
                 indent_char: str = "-"):
        """
        Initialize gqldoc with a schema source.

        Args:
            schema: SDL text, schema file path, introspection result,
                graphql-core GraphQLSchema or strawberry Schema
            endpoint: GraphQL endpoint URL shown in the documentation
            method: HTTP method shown in the documentation
            title: Top-level heading of the generated document
            introduction: Optional paragraph shown below the title
            include_mutations: Whether to document mutations as well as queries
            strict: Raise on type names missing from the schema instead of
                documenting them as empty objects
            validate_examples: Whether to validate example queries against the schema
            indent_char: Character repeated per nesting level in field tables
        """
        self.introspector = load_schema(schema)
        self.document = self.introspector.get_document(strict=strict)
        self.strict = strict

        checker = ExampleQueryChecker(self.introspector.schema) if validate_examples else None
        self.builder = DocumentBuilder(
            self.document,
            endpoint=endpoint,
            method=method,
            title=title,
            introduction=introduction,
            indent_char=indent_char,
            include_mutations=include_mutations,
            checker=checker
        )

    @classmethod
    def from_source(cls, source: Any, **kwargs) -> "GQLDoc":
        """
        Create a GQLDoc from any supported schema source.

        The source type picks the loader: strawberry Schema, graphql-core
        GraphQLSchema, introspection result dict, Path, or a string holding
        either a file path or SDL text. Keyword arguments are passed to
        ``__init__``.
        """
        introspector = load_schema(source)
        logger.debug(f"Loaded schema from {type(source).__name__} source")
        return cls(introspector, **kwargs)

    def operation_names(self) -> List[str]:
        """Get the names of all documented operations, queries first."""
        return list(self.builder.operations())

    def build(self, operations: Optional[List[str]] = None) -> List[OperationDoc]:
        """Generate tables and examples for all operations, or only the named ones."""
        docs = self.builder.build_all(operations)
        warning_count = sum(len(doc.warnings) for doc in docs)
        logger.info(
            f"Documented {len(docs)} operations"
            + (f" ({warning_count} example warnings)" if warning_count else "")
        )
        return docs

    def get_operation(self, name: str) -> OperationDoc:
        """Generate documentation for a single operation."""
        return self.build([name])[0]

    def generate(self, operations: Optional[List[str]] = None) -> str:
        """Generate the markdown document."""
        return self.builder.render(self.build(operations))

    def write(self, path: Union[str, Path], operations: Optional[List[str]] = None) -> Path:
        """Generate the markdown document and write it to ``path``."""
        path = Path(path)
        text = self.generate(operations)
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(text, encoding="utf-8")
        logger.info(f"Wrote {len(text)} characters to {path}")
        return path

    def create_app(self, path: str = "/docs") -> FastAPI:
        """Create a FastAPI app serving the generated documentation."""
        # Swagger and ReDoc pages would shadow a /docs path
        app = FastAPI(title=f"gqldoc - {self.builder.title}", docs_url=None, redoc_url=None)

        docs = {doc.name: doc for doc in self.build()}
        full_text = self.builder.render(list(docs.values()))

        @app.get(path, response_class=PlainTextResponse)
        async def document():
            return PlainTextResponse(full_text, media_type=MARKDOWN_MEDIA_TYPE)

        @app.get(path.rstrip("/") + "/operations/{name}", response_class=PlainTextResponse)
        async def operation(name: str):
            doc = docs.get(name)
            if doc is None:
                error = SchemaError(f"Unknown operation '{name}'", operation=name)
                raise HTTPException(status_code=404, detail=error.to_dict())
            block = "  \n".join(self.builder.render_operation(doc)).lstrip()
            return PlainTextResponse(block, media_type=MARKDOWN_MEDIA_TYPE)

        # Add health check
        @app.get("/health")
        async def health():
            return {"status": "healthy", "operations": len(docs)}

        return app

    def serve(
        self,
        host: str = "0.0.0.0",
        port: int = 8000,
        path: str = "/docs",
        debug: bool = True
    ) -> None:
        """Start the documentation server."""
        app = self.create_app(path)

        logger.info(f"📚 gqldoc server starting at http://{host}:{port}{path}")

        # Run server
        uvicorn.run(app, host=host, port=port, log_level="info" if debug else "warning")

# Importa módulos necessários para variáveis de ambiente e logs
import os
import logging
from dataclasses import dataclass
from typing import Any, Mapping

# Logger do módulo, nível configurável via variável de ambiente
logger = logging.getLogger(__name__)
logger.setLevel(os.environ.get("LOG_LEVEL", "INFO").upper())

# Rota única reconhecida pelo endpoint
HELLO_PATH = "/hello"
HELLO_METHOD = "GET"

# Mensagens fixas de resposta
GREETING = "Hello from Lambda"
BAD_REQUEST = (
    "Bad request syntax or unsupported method. "
    "Request path: {path}. HTTP method: {method}."
)

# Formatos de resposta aceitos em RESPONSE_STYLE
STYLE_FLAT = "flat"
STYLE_NESTED = "nested"


def _text(value: Any) -> str:
    # Campos ausentes ou nulos viram string vazia
    if value is None:
        return ""
    # Bytes são decodificados como UTF-8, sem falhar
    if isinstance(value, (bytes, bytearray)):
        return bytes(value).decode("utf-8", errors="replace")
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class HelloRequest:
    """Campos da requisição HTTP lidos pelo endpoint."""

    path: str = ""
    http_method: str = ""

    @classmethod
    def from_event(cls, event: Any) -> "HelloRequest":
        # Eventos que não são mapas são tratados como requisição vazia
        if not isinstance(event, Mapping):
            return cls()
        return cls(
            path=_text(event.get("path")),
            http_method=_text(event.get("httpMethod")),
        )

    @property
    def is_hello(self) -> bool:
        # Path sensível a maiúsculas; método não
        return self.path == HELLO_PATH and self.http_method.upper() == HELLO_METHOD


def response_style() -> str:
    # Lê o formato da resposta a partir da variável de ambiente
    style = os.environ.get("RESPONSE_STYLE", STYLE_FLAT).strip().lower()
    if style not in (STYLE_FLAT, STYLE_NESTED):
        logger.warning("Unknown RESPONSE_STYLE %r, using %s", style, STYLE_FLAT)
        return STYLE_FLAT
    return style


def build_response(status_code: int, message: str, style: str = STYLE_FLAT) -> dict:
    # Formato aninhado: a mensagem vai dentro de "body"
    if style == STYLE_NESTED:
        return {"statusCode": status_code, "body": {"message": message}}
    return {"statusCode": status_code, "message": message}


# Função principal Lambda, chamada a cada requisição
def lambda_handler(event, context):
    logger.info("Hello from lambda")

    request = HelloRequest.from_event(event)
    style = response_style()

    if request.is_hello:
        logger.debug("Accepted %s %s", request.http_method, request.path)
        return build_response(200, GREETING, style)

    # Qualquer outra combinação de path/método é uma requisição inválida
    logger.info(
        "Rejected request path=%r method=%r", request.path, request.http_method
    )
    message = BAD_REQUEST.format(path=request.path, method=request.http_method)
    return build_response(400, message, style)

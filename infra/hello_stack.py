# Importações de módulos necessários do AWS CDK e Python
from dataclasses import dataclass
from typing import Any, Optional

from constructs import Construct, Node
from aws_cdk import (
    Stack,  # Classe base para stacks do CDK
    CfnOutput,  # Para exportar valores após o deploy
    RemovalPolicy,  # Política de remoção de recursos
    Duration,  # Utilitário para definir tempos
    aws_iam as iam,  # Papéis e políticas IAM
    aws_lambda as _lambda,  # Funções Lambda
    aws_logs as logs,  # Logs do CloudWatch
)

import os  # Utilitário para manipulação de caminhos

# Diretório com o código da Lambda
HANDLER_DIR = os.path.join(os.path.dirname(__file__), "lambdas", "hello_world")


def _flag(value: Any) -> bool:
    # Valores de contexto passados via "-c chave=valor" chegam como string
    if isinstance(value, str):
        return value.strip().lower() in ("1", "true", "yes", "on")
    return bool(value)


def retention_days(name: str) -> logs.RetentionDays:
    # Converte o nome (ex: ONE_WEEK) para o enum de retenção do CloudWatch
    try:
        return logs.RetentionDays[name.strip().upper()]
    except KeyError:
        raise ValueError(f"Unknown log retention: {name!r}") from None


@dataclass(frozen=True)
class LambdaSettings:
    """Metadados de registro da Lambda consumidos pelo deploy."""

    lambda_name: str = "hello_world"
    role_name: str = "hello_world-role"
    publish_version: bool = True
    alias_name: str = "learn"
    logs_retention: str = "ONE_WEEK"
    log_level: str = "INFO"
    response_style: str = "flat"

    @classmethod
    def from_context(cls, node: Node) -> "LambdaSettings":
        # Lê sobrescritas do cdk.json ou da linha de comando (-c chave=valor)
        defaults = cls()

        def ctx(key: str, default: Any) -> Any:
            value = node.try_get_context(key)
            return default if value is None or value == "" else value

        return cls(
            lambda_name=ctx("lambda_name", defaults.lambda_name),
            role_name=ctx("role_name", defaults.role_name),
            publish_version=_flag(ctx("publish_version", defaults.publish_version)),
            alias_name=ctx("lambdas_alias_name", defaults.alias_name),
            logs_retention=ctx("logs_retention", defaults.logs_retention),
            log_level=ctx("log_level", defaults.log_level),
            response_style=ctx("response_style", defaults.response_style),
        )


# Classe principal da stack do endpoint hello_world
class HelloWorldStack(Stack):
    def __init__(
        self,
        scope: Construct,
        construct_id: str,
        settings: Optional[LambdaSettings] = None,
        **kwargs: Any,
    ) -> None:
        super().__init__(scope, construct_id, **kwargs)

        # Sem configuração explícita, usa o contexto do CDK
        self.settings = settings or LambdaSettings.from_context(self.node)
        cfg = self.settings

        # Papel de execução da Lambda com permissão apenas para escrever logs
        role = iam.Role(
            self,
            "HelloWorldRole",
            role_name=cfg.role_name,
            assumed_by=iam.ServicePrincipal("lambda.amazonaws.com"),
            managed_policies=[
                iam.ManagedPolicy.from_aws_managed_policy_name(
                    "service-role/AWSLambdaBasicExecutionRole"
                )
            ],
        )

        # Grupo de logs com retenção definida, removido junto com a stack
        log_group = logs.LogGroup(
            self,
            "HelloWorldLogs",
            log_group_name=f"/aws/lambda/{cfg.lambda_name}",
            retention=retention_days(cfg.logs_retention),
            removal_policy=RemovalPolicy.DESTROY,
        )

        # Função Lambda do endpoint
        self.function = _lambda.Function(
            self,
            "HelloWorldFn",
            function_name=cfg.lambda_name,
            runtime=_lambda.Runtime.PYTHON_3_12,
            handler="handler.lambda_handler",
            code=_lambda.Code.from_asset(HANDLER_DIR),
            role=role,
            log_group=log_group,
            environment={
                "LOG_LEVEL": cfg.log_level,
                "RESPONSE_STYLE": cfg.response_style,
            },
            timeout=Duration.seconds(5),
        )

        # Publica uma versão nova a cada deploy; sem publicação, o alias aponta para $LATEST
        version = (
            self.function.current_version
            if cfg.publish_version
            else self.function.latest_version
        )
        self.alias = _lambda.Alias(
            self,
            "HelloWorldAlias",
            alias_name=cfg.alias_name,
            version=version,
        )

        # Exporta valores importantes após o deploy
        CfnOutput(self, "FunctionName", value=self.function.function_name)
        CfnOutput(self, "AliasArn", value=self.alias.function_arn)

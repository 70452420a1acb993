"""
Synthesis tests for the hello_world deployment stack.

Requires the CDK jsii runtime (Node.js); skipped when it is unavailable.
"""

from __future__ import annotations

import shutil

import pytest

if shutil.which("node") is None:
    pytest.skip("AWS CDK needs a Node.js runtime", allow_module_level=True)

cdk = pytest.importorskip("aws_cdk")

from aws_cdk.assertions import Match, Template  # noqa: E402
from hello_stack import HelloWorldStack, LambdaSettings, retention_days  # noqa: E402


def synth(context: dict | None = None, settings: LambdaSettings | None = None) -> Template:
    app = cdk.App(context=context or {})
    stack = HelloWorldStack(app, "TestStack", settings=settings)
    return Template.from_stack(stack)


def test_function_is_registered_with_name_and_role() -> None:
    template = synth()

    template.has_resource_properties(
        "AWS::Lambda::Function",
        {
            "FunctionName": "hello_world",
            "Handler": "handler.lambda_handler",
            "Runtime": "python3.12",
            "Environment": {
                "Variables": {"LOG_LEVEL": "INFO", "RESPONSE_STYLE": "flat"}
            },
        },
    )
    template.has_resource_properties(
        "AWS::IAM::Role", {"RoleName": "hello_world-role"}
    )


def test_version_is_published_behind_default_alias() -> None:
    template = synth()

    template.resource_count_is("AWS::Lambda::Version", 1)
    template.has_resource_properties("AWS::Lambda::Alias", {"Name": "learn"})


def test_alias_name_comes_from_context() -> None:
    template = synth(context={"lambdas_alias_name": "dev"})

    template.has_resource_properties("AWS::Lambda::Alias", {"Name": "dev"})


def test_alias_points_to_latest_without_publishing() -> None:
    template = synth(context={"publish_version": "false"})

    template.resource_count_is("AWS::Lambda::Version", 0)
    template.has_resource_properties(
        "AWS::Lambda::Alias", {"FunctionVersion": "$LATEST"}
    )


def test_log_group_retention() -> None:
    template = synth(settings=LambdaSettings(logs_retention="ONE_MONTH"))

    template.has_resource_properties(
        "AWS::Logs::LogGroup",
        {"LogGroupName": "/aws/lambda/hello_world", "RetentionInDays": 30},
    )


def test_function_is_invoked_directly_without_url() -> None:
    template = synth()

    template.resource_count_is("AWS::Lambda::Url", 0)
    template.has_output("AliasArn", {"Value": Match.any_value()})
    template.has_output("FunctionName", {"Value": Match.any_value()})


def test_unknown_retention_is_rejected() -> None:
    with pytest.raises(ValueError, match="Unknown log retention"):
        retention_days("FOREVER_AND_EVER")

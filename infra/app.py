#!/usr/bin/env python3
import os
import aws_cdk as cdk
from hello_stack import HelloWorldStack

app = cdk.App()
HelloWorldStack(app, "HelloWorldStack",
                env=cdk.Environment(
                    account=os.getenv("CDK_DEFAULT_ACCOUNT"),
                    region=os.getenv("CDK_DEFAULT_REGION", "us-east-1")
                ))
app.synth()

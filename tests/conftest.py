"""Pytest configuration and shared descriptor fixtures."""

import json

import pytest


COMPONENT_DESCRIPTOR = {
    "component": {
        "kind": "component",
        "scheme": "aws-lambda",
        "title": "AWS Lambda",
        "description": "Manage and invoke AWS Lambda functions",
        "label": "cloud,computing,serverless",
        "producerOnly": True,
        "lenientProperties": False,
        "javaType": "org.apache.camel.component.aws.lambda.LambdaComponent",
    },
    "componentProperties": {
        "accessKey": {
            "kind": "property",
            "type": "string",
            "javaType": "java.lang.String",
            "secret": True,
            "description": "Amazon AWS Access Key",
        },
        "region": {
            "kind": "property",
            "type": "string",
            "javaType": "java.lang.String",
            "description": "Amazon AWS Region",
        },
    },
    "properties": {
        "function": {
            "kind": "path",
            "type": "string",
            "javaType": "java.lang.String",
            "required": True,
            "description": "Name of the Lambda function.",
            "label": "producer",
        },
        "operation": {
            "kind": "parameter",
            "type": "object",
            "javaType": "org.apache.camel.component.aws.lambda.LambdaOperations",
            "enum": ["listFunctions", "getFunction", "createFunction", "invokeFunction"],
            "defaultValue": "invokeFunction",
            "required": True,
            "label": "producer",
        },
        "pollInterval": {
            "kind": "parameter",
            "type": "integer",
            "javaType": "long",
            "defaultValue": 500,
            "label": "consumer,scheduler",
        },
        "header": {
            "kind": "parameter",
            "type": "object",
            "javaType": "java.util.Map<java.lang.String, java.lang.Object>",
            "prefix": "header.",
            "multiValue": True,
            "label": "advanced",
        },
        "awsLambdaClient": {
            "kind": "parameter",
            "type": "object",
            "javaType": "com.amazonaws.services.lambda.AWSLambda",
            "deprecated": True,
            "label": "advanced",
        },
        "synchronous": {
            "kind": "parameter",
            "type": "boolean",
            "javaType": "boolean",
            "defaultValue": False,
            "label": "advanced",
        },
    },
}

MAIN_DESCRIPTOR = {
    "groups": [
        {"name": "camel.main", "description": "Main configuration"},
    ],
    "properties": [
        {
            "name": "camel.main.stream-caching-enabled",
            "type": "boolean",
            "defaultValue": False,
            "description": "Sets whether stream caching is enabled or not.",
        },
        {
            "name": "camel.main.shutdown-timeout",
            "type": "int",
            "defaultValue": 45,
        },
        {
            "name": "camel.main.name",
            "type": "java.lang.String",
        },
        {
            "name": "camel.main.route-controller",
            "type": "org.apache.camel.spi.RouteController",
        },
    ],
}


@pytest.fixture
def component_json() -> str:
    return json.dumps(COMPONENT_DESCRIPTOR)


@pytest.fixture
def main_json() -> str:
    return json.dumps(MAIN_DESCRIPTOR)

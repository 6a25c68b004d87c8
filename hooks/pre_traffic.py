import json
import boto3
import os
import logging

logger = logging.getLogger()
logger.setLevel(logging.INFO)

codedeploy = boto3.client('codedeploy')
lambda_client = boto3.client('lambda')

SMOKE_ROSTER = [
    {'name': 'Anna', 'age': 18, 'email': 'anna@nass.de'},
    {'name': 'Bernd', 'age': 17, 'email': 'bernd@bibel.de'},
    {'name': 'Caro', 'age': 25, 'email': 'caro@yahoo.de'},
    {'name': 'Dora', 'age': 49, 'email': 'dora@yahoo.de'},
    {'name': 'Edgar', 'age': 20, 'email': 'edgar@erdapfel.de'},
    {'name': 'Fritz', 'age': 5, 'email': 'fritz@email.de'},
]
EXPECTED_DOMAINS = ['erdapfel.de', 'nass.de', 'yahoo.de']


def lambda_handler(event, context):
    """
    Pre-traffic hook for CodeDeploy.
    Invokes the new version with a known roster before shifting traffic.
    """
    logger.info(f"Pre-traffic hook triggered: {json.dumps(event)}")

    deployment_id = event['DeploymentId']
    lifecycle_event_hook_execution_id = event['LifecycleEventHookExecutionId']

    try:
        target_function = os.environ.get('TARGET_FUNCTION')
        if not target_function:
            raise ValueError("TARGET_FUNCTION environment variable is not set")

        logger.info(f"Running smoke test on {target_function}")

        response = lambda_client.invoke(
            FunctionName=target_function,
            InvocationType='RequestResponse',
            Payload=json.dumps({'persons': SMOKE_ROSTER})
        )

        response_payload = json.loads(response['Payload'].read())
        logger.info(f"Test response: {json.dumps(response_payload)}")

        if response.get('FunctionError'):
            raise Exception(f"Function returned error: {response_payload}")

        if response.get('StatusCode') != 200:
            raise Exception(f"Unexpected status code: {response.get('StatusCode')}")

        if response_payload.get('statusCode') != 200:
            raise Exception(f"Invalid response status: {response_payload.get('statusCode')}")

        body = json.loads(response_payload.get('body', '{}'))
        if body.get('domains') != EXPECTED_DOMAINS:
            raise Exception(f"Unexpected domains: {body.get('domains')}")

        logger.info("Pre-traffic validation passed")

        codedeploy.put_lifecycle_event_hook_execution_status(
            deploymentId=deployment_id,
            lifecycleEventHookExecutionId=lifecycle_event_hook_execution_id,
            status='Succeeded'
        )

        return {
            'statusCode': 200,
            'body': json.dumps('Pre-traffic validation succeeded')
        }

    except Exception as e:
        logger.error(f"Pre-traffic validation failed: {str(e)}", exc_info=True)

        # Report failure - this will prevent deployment
        codedeploy.put_lifecycle_event_hook_execution_status(
            deploymentId=deployment_id,
            lifecycleEventHookExecutionId=lifecycle_event_hook_execution_id,
            status='Failed'
        )

        return {
            'statusCode': 500,
            'body': json.dumps(f'Pre-traffic validation failed: {str(e)}')
        }

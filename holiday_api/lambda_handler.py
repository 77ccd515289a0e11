"""
AWS Lambda entry point for the Holiday API.
Set Lambda handler to: holiday_api.lambda_handler.handler
Use with Lambda Function URL or API Gateway HTTP API.
"""
import os
from mangum import Mangum
from holiday_api.main import app

# Single Mangum instance reused across warm invocations, so the
# MongoDB connection held by the app is reused as well
handler = Mangum(
    app,
    lifespan="off",
    api_gateway_base_path=os.environ.get("API_GATEWAY_BASE_PATH", ""),
)

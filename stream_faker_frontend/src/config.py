import os

# Backend Configuration
BACKEND_URL = os.getenv("BACKEND_URL", "http://schema-processor-backend:8000")

# API Endpoints
UPLOAD_ENDPOINT = f"{BACKEND_URL}/schema-processor/upload"
START_GENERATION_ENDPOINT = f"{BACKEND_URL}/schema-processor/start-generation"
STREAM_STATS_ENDPOINT = f"{BACKEND_URL}/schema-processor/streams/{{stream_id}}/stats"
STOP_STREAM_ENDPOINT = f"{BACKEND_URL}/schema-processor/streams/{{stream_id}}/stop"

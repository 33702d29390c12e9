FEW_SHOT_EXAMPLES = [
    {
        "title": "Person Data",
        "raw_schema": {
            "type": "object",
            "properties": {
                "unique_user_id": {"type": "string", "description": "The unique system identifier for a user."},
                "first_name": {"type": "string", "description": "The given name of the person."},
                "surname": {"type": "string", "description": "The family name of the person."},
                "electronic_mail": {"type": "string", "description": "Primary email address for the user."},
                "person_age_years": {"type": "integer", "description": "Current age of the individual in full years."},
                "account_creation_timestamp": {"type": "string", "description": "The exact date and time the user account was created."},
            },
        },
        "enhanced_schema": {
            "type": "object",
            "properties": {
                "unique_user_id": {"type": "string", "description": "The unique system identifier for a user.", "faker": "uuid"},
                "first_name": {"type": "string", "description": "The given name of the person.", "faker": "firstName"},
                "surname": {"type": "string", "description": "The family name of the person.", "faker": "lastName"},
                "electronic_mail": {"type": "string", "description": "Primary email address for the user.", "faker": "email"},
                "person_age_years": {"type": "integer", "description": "Current age of the individual in full years.", "faker": "age"},
                "account_creation_timestamp": {"type": "string", "description": "The exact date and time the user account was created.", "format": "date-time"},
            },
        },
    },
    {
        "title": "IoT Device Data",
        "raw_schema": {
            "type": "object",
            "properties": {
                "device_identifier": {"type": "string", "description": "Unique ID for the sensor device."},
                "event_time": {"type": "string", "description": "Timestamp of the sensor reading."},
                "geo_latitude": {"type": "number", "description": "Geographic latitude of the device."},
                "geo_longitude": {"type": "number", "description": "Geographic longitude of the device."},
                "charge_level_percent": {"type": "number", "description": "Remaining battery charge as a percentage."},
            },
        },
        "enhanced_schema": {
            "type": "object",
            "properties": {
                "device_identifier": {"type": "string", "description": "Unique ID for the sensor device.", "faker": "uuid"},
                "event_time": {"type": "string", "description": "Timestamp of the sensor reading.", "format": "date-time"},
                "geo_latitude": {"type": "number", "description": "Geographic latitude of the device.", "faker": "latitude"},
                "geo_longitude": {"type": "number", "description": "Geographic longitude of the device.", "faker": "longitude"},
                "charge_level_percent": {"type": "number", "description": "Remaining battery charge as a percentage.", "faker": "percentage"},
            },
        },
    },
]

class AppStatusCode:
    # Success
    DATA_RETRIEVED_SUCCESSFULLY = "100"
    CREATED_SUCCESSFULLY = "101"
    UPDATED_SUCCESSFULLY = "102"
    DELETED_SUCCESSFULLY = "103"

    # Input
    INVALID_INPUT = "200"
    REQUIRED_VALIDATION_ERROR = "201"

    # Business rules
    NOT_FOUND = "300"
    DUPLICATE_ADD_ERROR = "301"
    DELETE_BLOCKED_BY_DEPENDENTS = "302"

    # Failures
    OPERATION_FAILED = "500"
    STORE_UNAVAILABLE = "501"

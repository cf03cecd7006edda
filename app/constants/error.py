# constants/errors.py
class ERROR:
    UNAUTHORIZED = "Authentication failed. Token is missing or invalid."
    INTERNAL_ERROR = "Something went wrong. Please try again later"
    FORM_NOT_VALID = "Form is not valid"
    FORM_NOT_CREATED = "Form could not be created"
    FORM_NOT_FOUND = "Form not found"
    FORM_NOT_PUBLISHED = "Form not found or not published"
    SUBMISSION_NOT_CREATED = "Submission could not be created"
    REQUIRED_NAME = "Name must contain at least 4 characters."
    REQUIRED_CONTENT = "Content is required."

# constants/messages.py
class MESSAGE:
    FORM_CREATED = "Form created successfully"
    FORM_UPDATED = "Form updated successfully"
    FORM_PUBLISHED = "Form published successfully"
    FORM_FOUND = "Form retrieved successfully"
    FORMS_FOUND = "Forms retrieved successfully"
    FORM_STATS = "Form statistics retrieved successfully"
    FORM_CONTENT = "Form content retrieved successfully"
    FORM_SUBMITTED = "Form submitted successfully"
    SUBMISSIONS_FOUND = "Submissions retrieved successfully"

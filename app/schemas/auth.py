from email_validator import EmailNotValidError, validate_email
from pydantic import BaseModel, EmailStr, constr, field_validator


class RegisterRequest(BaseModel):
    username: constr(strip_whitespace=True, min_length=3, max_length=50)
    email: EmailStr
    password: constr(min_length=6, max_length=128)


class LoginRequest(BaseModel):
    email: constr(strip_whitespace=True, min_length=1)
    password: constr(min_length=1)

    @field_validator("email")
    @classmethod
    def normalize_email(cls, value):
        # Same normalized form EmailStr stores at registration; malformed
        # addresses go through unchanged and fail the credential check
        try:
            return validate_email(value, check_deliverability=False).normalized
        except EmailNotValidError:
            return value

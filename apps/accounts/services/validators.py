"""Field validation for account email, nickname and password."""

import re
from typing import Optional

from django.conf import settings
from django.contrib.auth import password_validation
from django.core.exceptions import ValidationError
from django.core.validators import validate_email as django_validate_email
from django.utils.translation import gettext as _

EMAIL_MAX_LENGTH = 255

# Letters (any script), digits, underscore and hyphen
NICKNAME_PATTERN = re.compile(r'[\w-]+')


class AccountFieldValidator:
    """
    Default field rules.

    Failures raise ValidationError with code 'format', 'length' or
    'characters'. Password failures keep the codes of the configured
    AUTH_PASSWORD_VALIDATORS.
    """

    def __init__(
        self,
        *,
        nickname_min_length: Optional[int] = None,
        nickname_max_length: Optional[int] = None,
        password_validators: Optional[list] = None,
    ):
        self.nickname_min_length = (
            nickname_min_length
            if nickname_min_length is not None
            else settings.ACCOUNTS_NICKNAME_MIN_LENGTH
        )
        self.nickname_max_length = (
            nickname_max_length
            if nickname_max_length is not None
            else settings.ACCOUNTS_NICKNAME_MAX_LENGTH
        )
        self.password_validators = password_validators

    def validate_email(self, value: str) -> None:
        if len(value) > EMAIL_MAX_LENGTH:
            raise ValidationError(
                _('Email must be at most %(max)d characters.'),
                code='length',
                params={'max': EMAIL_MAX_LENGTH},
            )
        try:
            django_validate_email(value)
        except ValidationError as e:
            raise ValidationError(_('Enter a valid email address.'), code='format') from e

    def validate_nickname(self, value: str) -> None:
        if not self.nickname_min_length <= len(value) <= self.nickname_max_length:
            raise ValidationError(
                _('Nickname must be between %(min)d and %(max)d characters.'),
                code='length',
                params={'min': self.nickname_min_length, 'max': self.nickname_max_length},
            )
        if not NICKNAME_PATTERN.fullmatch(value):
            raise ValidationError(
                _('Nickname may only contain letters, digits, "_" and "-".'),
                code='characters',
            )

    def validate_password(self, value: str) -> None:
        password_validation.validate_password(
            value,
            password_validators=self.password_validators,
        )

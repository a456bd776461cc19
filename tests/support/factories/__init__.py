"""
Test Data Factories

Factory-boy based factories for generating test data.
Follows the pattern: Faker + overrides.

Usage:
    from tests.support.factories import UserFactory

    user = UserFactory.build()
    page.fill_registration_form(**user)

Pattern:
    - Factories build plain dicts matching page-object keyword arguments
    - Emails are unique per call so registrations never collide
"""

from tests.support.factories.user_factory import STRONG_PASSWORD, ExistingUserFactory, UserFactory

__all__ = ["UserFactory", "ExistingUserFactory", "STRONG_PASSWORD"]

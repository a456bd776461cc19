"""
Page Objects

Page Object Model (POM) for the Ideoz chat application.
Encapsulates page interactions and locators.

Usage:
    from ideoz_e2e.pages import LoginPage

    login = LoginPage(page)
    login.goto()
    login.click_login_button()
    login.login(email="user@example.com", password="secret")

Pattern:
    - One class per page/major component
    - Locators built once in __init__, resolved at action time
    - Methods for actions (click, fill)
    - Query methods return plain values or models for assertions
"""

from ideoz_e2e.pages.base_page import BasePage
from ideoz_e2e.pages.file_upload_page import FileUploadPage
from ideoz_e2e.pages.login_page import LoginPage
from ideoz_e2e.pages.registration_page import RegistrationPage

__all__ = ["BasePage", "LoginPage", "RegistrationPage", "FileUploadPage"]

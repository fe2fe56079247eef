"""Instruction blocks printed by the admin setup script."""

from __future__ import annotations

from irta_admin.core.config import Settings

CONSOLE_METHOD_HEADER = "=== FIREBASE CONSOLE METHOD (RECOMMENDED) ==="


def intro_lines(settings: Settings) -> list[str]:
    """Describe both ways of creating the admin and ask which one to expand."""

    return [
        "To create a user via terminal, you need Firebase Admin SDK.",
        "",
        "Option 1: Use Firebase Console (Easier)",
        f"Go to: {settings.console_url}",
        f"Project: {settings.project_id}",
        "Authentication > Users > Add user",
        "",
        "Option 2: Use Firebase CLI with Admin SDK setup",
        "",
        "This script requires Firebase Admin SDK setup with service account.",
        f"Would you like instructions for Firebase Console method instead? ({settings.affirmative_token}/n)",
    ]


def console_method_lines(settings: Settings) -> list[str]:
    steps = [
        f"Go to: {settings.console_url}",
        f"Select project: {settings.project_id}",
        "Click: Authentication > Users",
        "Click: Add user",
        f"Email: {settings.admin_email}",
        f"Password: {settings.admin_password}",
        "Copy the User UID",
        "Go to: Firestore Database",
        f"Create collection: {settings.users_collection}",
        "Document ID: [paste UID]",
        f'Add field: {settings.role_field} = "{settings.admin_role}"',
    ]
    return [
        "",
        CONSOLE_METHOD_HEADER,
        "",
        *_numbered(steps),
        "",
        f"Then login with: {settings.login_hint}",
    ]


def sdk_setup_lines(settings: Settings) -> list[str]:
    steps = [
        "Download service account key from Firebase Console",
        f"Install: {settings.sdk_install_command}",
        "Use the service account key to initialize admin",
    ]
    return [
        "",
        "To use Admin SDK, you need:",
        *_numbered(steps),
        "",
        "The Firebase Console method is much simpler for creating one user.",
    ]


def is_affirmative(answer: str, settings: Settings) -> bool:
    """Return True when the answer selects the console walkthrough."""

    return answer.lower() == settings.affirmative_token


def guidance_lines(answer: str, settings: Settings) -> list[str]:
    """Pick the block matching the operator's answer."""

    if is_affirmative(answer, settings):
        return console_method_lines(settings)
    return sdk_setup_lines(settings)


def _numbered(steps: list[str]) -> list[str]:
    return [f"{index}. {step}" for index, step in enumerate(steps, start=1)]

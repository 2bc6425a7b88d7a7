"""User domain models for minibnb.

The marketplace distinguishes three roles: a plain user (guest), a host who
owns listings, and a co-host acting on someone else's listing through a
CohostPermission grant. The role is derived from ownership and grants, so
revoking the last grant automatically returns a co-host to the base role
without any bookkeeping.
"""

from __future__ import annotations

from typing import Any

from django.contrib.auth.models import AbstractUser, BaseUserManager  # type: ignore
from django.db import models  # type: ignore
from django.utils.translation import gettext_lazy as _  # type: ignore


class UserManager(BaseUserManager):
    """User manager that uses email as the login."""

    use_in_migrations = True

    def _create_user(self, email: str, password: str | None, **extra_fields: Any):
        if not email:
            raise ValueError("An email address is required to create a user.")
        email = self.normalize_email(email)
        user = self.model(email=email, **extra_fields)
        if password:
            user.set_password(password)
        else:
            user.set_unusable_password()
        user.save(using=self._db)
        return user

    def create_user(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", False)
        extra_fields.setdefault("is_superuser", False)
        return self._create_user(email, password, **extra_fields)

    def create_superuser(self, email: str, password: str | None = None, **extra_fields: Any):
        extra_fields.setdefault("is_staff", True)
        extra_fields.setdefault("is_superuser", True)

        if extra_fields.get("is_staff") is not True:
            raise ValueError("Superuser must have is_staff=True.")
        if extra_fields.get("is_superuser") is not True:
            raise ValueError("Superuser must have is_superuser=True.")

        return self._create_user(email, password, **extra_fields)


class User(AbstractUser):
    """Marketplace user; may be guest, host and co-host on different listings."""

    class Role(models.TextChoices):
        USER = "user", _("User")
        HOST = "host", _("Host")
        COHOST = "cohost", _("Co-host")

    username = None
    email = models.EmailField(_("email address"), unique=True)
    is_host = models.BooleanField(
        _("host"),
        default=False,
        help_text=_("Set when the user opts in to hosting."),
    )
    created_at = models.DateTimeField(auto_now_add=True)
    updated_at = models.DateTimeField(auto_now=True)

    objects = UserManager()

    USERNAME_FIELD = "email"
    REQUIRED_FIELDS: list[str] = []

    class Meta:
        verbose_name = _("User")
        verbose_name_plural = _("Users")
        ordering = ["-created_at"]

    def __str__(self) -> str:
        return self.email

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    # --- Derived role -----------------------------------------------------
    @property
    def role(self) -> str:
        """Computed from the current database state on every access."""
        if self.is_hosting():
            return self.Role.HOST
        if self.is_cohosting():
            return self.Role.COHOST
        return self.Role.USER

    def is_hosting(self) -> bool:
        if self.is_host:
            return True
        if self.pk is None:
            return False
        return self.listings.exists()

    def is_cohosting(self) -> bool:
        if self.pk is None:
            return False
        return self.cohost_grants.exists()

    def become_host(self) -> None:
        if not self.is_host:
            self.is_host = True
            self.save(update_fields=["is_host", "updated_at"])

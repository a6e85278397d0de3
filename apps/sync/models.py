# ==========================================
# apps/sync/models.py
# ==========================================

from django.db import models
import uuid


class AccountStatus(models.TextChoices):
    AVAILABLE = 'available', 'Available'
    NO_ACCOUNT = 'no_account', 'No account'
    RESTRICTED = 'restricted', 'Restricted'
    UNAVAILABLE = 'unavailable', 'Temporarily unavailable'
    COULD_NOT_DETERMINE = 'could_not_determine', 'Could not determine'


class SyncEventKind(models.TextChoices):
    SETUP = 'setup', 'Setup'
    IMPORT = 'import', 'Import'
    EXPORT = 'export', 'Export'
    ERROR = 'error', 'Error'
    INFO = 'info', 'Info'


class SyncState(models.Model):
    """Cloud sync status of one user's store."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.OneToOneField('accounts.User', on_delete=models.CASCADE, related_name='sync_state')
    container_id = models.CharField(max_length=200)
    account_status = models.CharField(
        max_length=30,
        choices=AccountStatus.choices,
        default=AccountStatus.COULD_NOT_DETERMINE
    )
    schema_initialized = models.BooleanField(default=False)
    schema_initialized_at = models.DateTimeField(null=True, blank=True)
    last_checked_at = models.DateTimeField(null=True, blank=True)
    updated_at = models.DateTimeField(auto_now=True)

    class Meta:
        db_table = 'sync_states'

    def __str__(self):
        return f"{self.user} [{self.account_status}]"

    def reset_schema(self):
        self.schema_initialized = False
        self.schema_initialized_at = None


class SyncEvent(models.Model):
    """Entry of the bounded sync event log."""

    id = models.UUIDField(primary_key=True, default=uuid.uuid4, editable=False)
    user = models.ForeignKey('accounts.User', on_delete=models.CASCADE, related_name='sync_events')
    kind = models.CharField(max_length=20, choices=SyncEventKind.choices, default=SyncEventKind.INFO)
    message = models.TextField()
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        db_table = 'sync_events'
        indexes = [
            models.Index(fields=['user', 'created_at'], name='sync_events_user_created_idx'),
        ]
        ordering = ['-created_at']

    def __str__(self):
        return f"[{self.created_at:%Y-%m-%d %H:%M:%S}] {self.kind}: {self.message}"

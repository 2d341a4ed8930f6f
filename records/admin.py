"""
Django admin registrations for the records models.

Records are soft deleted through the API; the admin exposes the flag
instead of a delete action so rows referenced by other collections are
never physically removed.
"""

from django.contrib import admin

from .models import Patient, Malady, Medicament, Consultation


class RecordAdmin(admin.ModelAdmin):
    readonly_fields = ('id', 'created_at', 'updated_at')

    def has_delete_permission(self, request, obj=None):
        return False


@admin.register(Patient)
class PatientAdmin(RecordAdmin):
    list_display = ('id', 'first_name', 'last_name', 'email', 'is_deleted', 'created_at')
    list_filter = ('is_deleted',)
    search_fields = ('id', 'first_name', 'last_name', 'email')


@admin.register(Malady)
class MaladyAdmin(RecordAdmin):
    list_display = ('id', 'malady_name', 'is_deleted', 'created_at')
    list_filter = ('is_deleted',)
    search_fields = ('id', 'malady_name')


@admin.register(Medicament)
class MedicamentAdmin(RecordAdmin):
    list_display = ('id', 'medicament_name', 'malady', 'is_deleted', 'created_at')
    list_filter = ('is_deleted', 'malady')
    search_fields = ('id', 'medicament_name', 'malady__malady_name')


@admin.register(Consultation)
class ConsultationAdmin(RecordAdmin):
    list_display = ('id', 'patient', 'malady', 'medicament', 'date', 'is_deleted')
    list_filter = ('is_deleted', 'malady')
    search_fields = ('id', 'patient__email', 'patient__last_name', 'notes')
    date_hierarchy = 'date'

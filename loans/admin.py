from django.contrib import admin

from loans.models import Customer, Loan, LoanExtension, LoanRequestRecord


class LoanExtensionInline(admin.TabularInline):
    model = LoanExtension
    extra = 0
    readonly_fields = ["extension_term_in_days", "additional_interest", "created_at"]


class LoanAdmin(admin.ModelAdmin):
    list_display = ["id", "customer", "amount", "interest", "term_in_days", "created_at"]
    search_fields = ["customer__personal_id", "customer__surname"]
    list_filter = ("created_at",)
    inlines = [LoanExtensionInline]


class CustomerAdmin(admin.ModelAdmin):
    list_display = ["personal_id", "name", "surname"]
    search_fields = ["personal_id", "name", "surname"]


class LoanRequestRecordAdmin(admin.ModelAdmin):
    list_display = ["personal_id", "requested_at"]
    search_fields = ["personal_id"]


admin.site.register(Customer, CustomerAdmin)
admin.site.register(Loan, LoanAdmin)
admin.site.register(LoanRequestRecord, LoanRequestRecordAdmin)

from django.urls import path
from .views import (
    LoanCreateView,
    LoanExtendView,
    LoanListView,
    CustomerLoansView
)

urlpatterns = [
    path('', LoanCreateView.as_view(), name='create-loan'),
    path('extendLoan', LoanExtendView.as_view(), name='extend-loan'),
    path('list', LoanListView.as_view(), name='list-loans'),
    path('personal-id/<str:personal_id>', CustomerLoansView.as_view(), name='customer-loans'),
]

from django.urls import path
from . import views

app_name = 'sync'

urlpatterns = [
    path('status/', views.sync_status, name='status'),
    path('recheck/', views.recheck_status, name='recheck'),
    path('initialize-schema/', views.initialize_schema, name='initialize-schema'),
    path('diagnostics/', views.diagnostics, name='diagnostics'),
    path('events/', views.events, name='events'),
]

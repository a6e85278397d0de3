from django.urls import path
from . import views

app_name = 'notifications'

urlpatterns = [
    path('preferences/', views.preferences, name='preferences'),
    path('pending/', views.pending_reminders, name='pending'),
    path('reschedule/', views.reschedule, name='reschedule'),
]

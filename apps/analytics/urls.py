from django.urls import path
from . import views

app_name = 'analytics'

urlpatterns = [
    path('statistics/', views.collection_statistics, name='statistics'),
]

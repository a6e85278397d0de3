from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'bottles'

router = DefaultRouter()
router.register(r'', views.BottleViewSet, basename='bottle')

urlpatterns = [
    # GET    /api/bottles/                   - List collection (?search=)
    # POST   /api/bottles/                   - Add bottle
    # GET    /api/bottles/{id}/              - Bottle details
    # PATCH  /api/bottles/{id}/              - Manual edit
    # DELETE /api/bottles/{id}/              - Delete bottle

    # Ledger actions
    # POST   /api/bottles/{id}/consume/      - Log a pour
    # POST   /api/bottles/{id}/pour/         - Log a standard 30 ml pour
    # POST   /api/bottles/{id}/remaining/    - Set remaining volume
    # GET    /api/bottles/{id}/logs/         - Drinking history
    # GET    /api/bottles/random/            - Random pick

    path('', include(router.urls)),
]

from django.urls import path, include
from rest_framework.routers import DefaultRouter
from . import views

app_name = 'wishlist'

router = DefaultRouter()
router.register(r'', views.WishlistItemViewSet, basename='item')

urlpatterns = [
    # GET    /api/wishlist/                 - Wishlist (?search=)
    # POST   /api/wishlist/                 - Add item
    # GET    /api/wishlist/{id}/            - Item details
    # PATCH  /api/wishlist/{id}/            - Update item
    # DELETE /api/wishlist/{id}/            - Remove item
    # POST   /api/wishlist/{id}/convert/    - Move into collection

    path('', include(router.urls)),
]

from django.contrib import admin
from django.urls import include, path

urlpatterns = [
    path('admin/', admin.site.urls),
    path('products/', include('apps.catalog.urls')),
    path('api/', include('apps.catalog.api.urls')),
    path('api/', include('apps.storefront.api.urls')),
]

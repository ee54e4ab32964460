from django.urls import path
from . import views

app_name = 'catalog'

urlpatterns = [
    # Product page data
    path('<slug:slug>/', views.product_detail, name='product_detail'),

    # Variant selection events
    path('<slug:slug>/select/', views.product_select_option, name='product_select_option'),
    path('<slug:slug>/thumbnail-failed/', views.product_thumbnail_failed, name='product_thumbnail_failed'),
]

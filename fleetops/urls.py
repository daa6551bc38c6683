from django.urls import path
from . import views

urlpatterns = [
    path('', views.dashboard, name='dashboard'),

    path('trips/', views.trip_list, name='trip_list'),
    path('trips/<str:trip_id>/', views.trip_detail, name='trip_detail'),

    path('vehicles/', views.vehicle_list, name='vehicle_list'),
    path('vehicles/<str:vehicle_id>/delete/', views.vehicle_delete, name='vehicle_delete'),

    path('insight/', views.insight, name='insight'),
    path('download-summary/', views.download_summary, name='download_summary'),
]

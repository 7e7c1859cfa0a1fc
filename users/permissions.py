from rest_framework import permissions


class IsPartnerOrAdmin(permissions.BasePermission):
    """
    Only advertisers (partners) and admins can manage campaign QR codes.
    """
    message = "Forbidden - Only advertisers can manage QR codes"

    def has_permission(self, request, view):
        user = request.user
        if not (user and user.is_authenticated):
            return False
        return user.is_partner or user.is_platform_admin


class IsCampaignOwner(permissions.BasePermission):
    """
    Partners only see their own campaigns. Admins see all.
    """
    message = "Forbidden - Campaign belongs to another advertiser"

    def has_object_permission(self, request, view, obj):
        # obj here is expected to be an AdCampaign
        if request.user.is_platform_admin:
            return True
        return obj.advertiser_id == request.user.id

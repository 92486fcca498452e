"""
Mixins para serializers que centralizan patrones comunes y eliminan redundancia.

Siguiendo el principio DRY (Don't Repeat Yourself), estos mixins permiten
centralizar la configuración Meta que se repite en múltiples serializers del proyecto.
"""


class AuditableWithUserSerializerMixin:
    """
    Mixin para serializers de modelos con auditoría completa incluyendo usuarios.

    Marca como solo lectura:
    - id, created_at, updated_at
    - created_by, updated_by

    Uso:
        class MyFullAuditSerializer(AuditableWithUserSerializerMixin, serializers.ModelSerializer):
            class Meta(AuditableWithUserSerializerMixin.Meta):
                model = MyFullAuditModel
    """

    class Meta:
        fields = '__all__'
        read_only_fields = ('id', 'created_at', 'updated_at',
                            'created_by', 'updated_by')

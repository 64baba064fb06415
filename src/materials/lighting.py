# materials/lighting.py
from core.color import Color
from core.point import Point3
from core.vector import Vector3
from materials.light import PointLight
from materials.material import Material


def lighting(material: Material, light: PointLight, point: Point3,
             eye: Vector3, normal: Vector3, in_shadow: bool = False) -> Color:
    """
    Evaluates the Phong reflection model at a surface point.

    Args:
        material: Surface material at the point
        light: The point light being sampled
        point: World-space surface point
        eye: Unit vector from the point towards the viewer
        normal: Unit surface normal, facing the viewer
        in_shadow: When True only the ambient term contributes

    Returns:
        Color: ambient + diffuse + specular contribution of this light
    """
    effective_color = material.color * light.intensity
    ambient = effective_color * material.ambient
    if in_shadow:
        return ambient

    lightv = (light.position - point).normalize()
    light_dot_normal = lightv.dot(normal)
    if light_dot_normal <= 0:
        # Light is on the other side of the surface.
        return ambient

    diffuse = effective_color * material.diffuse * light_dot_normal

    reflectv = (-lightv).reflect(normal)
    reflect_dot_eye = reflectv.dot(eye)
    if reflect_dot_eye <= 0:
        specular = Color.black()
    else:
        factor = reflect_dot_eye ** material.shininess
        specular = light.intensity * material.specular * factor

    return ambient + diffuse + specular

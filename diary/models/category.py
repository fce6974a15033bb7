from django.db import models


class Category(models.Model):
    """Kind of living thing an entry records (birds, insects, ...)."""
    DEFAULT_NAMES = [
        "Mammals",
        "Birds",
        "Fish",
        "Insects",
        "Amphibians",
        "Reptiles",
        "Plants",
        "Fungi",
        "Other",
    ]

    name = models.CharField(max_length=100, unique=True)

    class Meta:
        db_table = "category"
        ordering = ["name"]
        verbose_name_plural = "categories"

    def __str__(self):
        return self.name

class DescriptiveSearchMixin:
    """
    Spell out the searchable fields in the admin's search help text.

    Each entry in ``search_fields`` is rendered as "<Model>'s <Field>". For
    lookups that span relationships only the final model is named.

    A ModelAdmin that defines its own ``search_help_text`` is left alone.
    """

    def get_search_fields(self, request):
        search_fields = super().get_search_fields(request)
        if search_fields and self.search_help_text is None:
            descriptions = []
            for search_field in search_fields:
                opts = self.model._meta
                field = None
                for part in search_field.split("__"):
                    field = opts.get_field(part)
                    if not getattr(field, "related_model", None):
                        break
                    opts = field.related_model._meta
                descriptions.append(
                    f"{opts.verbose_name.title()}'s {field.verbose_name.title()}"
                )
            self.search_help_text = f'Search by: {", ".join(descriptions)}'
        return search_fields

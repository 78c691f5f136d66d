"""Django-приложение Bootsy: WYSIWYG-редактор с галереей изображений."""

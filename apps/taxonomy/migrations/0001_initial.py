import uuid

import django.db.models.deletion
import django.db.models.functions.text
from django.db import migrations, models


class Migration(migrations.Migration):

    initial = True

    dependencies = []

    operations = [
        migrations.CreateModel(
            name='CategoryModel',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(db_index=True, max_length=100)),
                ('slug', models.SlugField(max_length=120, unique=True)),
                ('description', models.TextField(blank=True, default='')),
                ('short_description', models.CharField(blank=True, default='', max_length=200)),
                ('image', models.CharField(blank=True, default='', max_length=500)),
                ('icon', models.CharField(blank=True, default='', max_length=100)),
                ('color', models.CharField(blank=True, max_length=7, null=True)),
                ('sort_order', models.IntegerField(default=0)),
                ('is_active', models.BooleanField(db_index=True, default=True)),
                ('is_visible', models.BooleanField(default=True)),
                ('is_featured', models.BooleanField(default=False)),
                ('seo_title', models.CharField(blank=True, default='', max_length=60)),
                ('seo_description', models.CharField(blank=True, default='', max_length=160)),
                ('seo_keywords', models.JSONField(blank=True, default=list)),
                ('created_by', models.CharField(blank=True, max_length=64, null=True)),
                ('updated_by', models.CharField(blank=True, max_length=64, null=True)),
                ('created_at', models.DateTimeField()),
                ('updated_at', models.DateTimeField()),
                ('parent', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='children',
                    to='taxonomy.categorymodel',
                )),
            ],
            options={
                'verbose_name': 'Category',
                'verbose_name_plural': 'Categories',
                'db_table': 'categories',
                'ordering': ['sort_order', 'name'],
            },
        ),
        migrations.CreateModel(
            name='TagModel',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(db_index=True, max_length=50)),
                ('slug', models.SlugField(max_length=60)),
                ('description', models.CharField(blank=True, default='', max_length=200)),
                ('color', models.CharField(default='#6B7280', max_length=7)),
                ('is_active', models.BooleanField(default=True)),
                ('sort_order', models.IntegerField(default=0)),
                ('is_system', models.BooleanField(default=False)),
                ('total_products', models.PositiveIntegerField(default=0)),
                ('last_used', models.DateTimeField()),
                ('created_by', models.CharField(blank=True, max_length=64, null=True)),
                ('updated_by', models.CharField(blank=True, max_length=64, null=True)),
                ('created_at', models.DateTimeField()),
                ('updated_at', models.DateTimeField()),
                ('category', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='scoped_tags',
                    to='taxonomy.categorymodel',
                )),
            ],
            options={
                'db_table': 'tags',
                'ordering': ['sort_order', 'name'],
            },
        ),
        migrations.AddField(
            model_name='categorymodel',
            name='tags',
            field=models.ManyToManyField(blank=True, related_name='categories', to='taxonomy.tagmodel'),
        ),
        migrations.CreateModel(
            name='ProductModel',
            fields=[
                ('id', models.UUIDField(default=uuid.uuid4, editable=False, primary_key=True, serialize=False)),
                ('name', models.CharField(max_length=255)),
                ('deleted_at', models.DateTimeField(blank=True, null=True)),
                ('created_at', models.DateTimeField(auto_now_add=True)),
                ('category', models.ForeignKey(
                    blank=True,
                    null=True,
                    on_delete=django.db.models.deletion.PROTECT,
                    related_name='products',
                    to='taxonomy.categorymodel',
                )),
                ('tags', models.ManyToManyField(blank=True, related_name='products', to='taxonomy.tagmodel')),
            ],
            options={
                'db_table': 'taxonomy_products',
                'ordering': ['-created_at'],
            },
        ),
        migrations.AddIndex(
            model_name='categorymodel',
            index=models.Index(fields=['is_active', 'sort_order'], name='categories_active_sort_idx'),
        ),
        migrations.AddConstraint(
            model_name='categorymodel',
            constraint=models.UniqueConstraint(
                django.db.models.functions.text.Lower('name'),
                name='uniq_category_name_ci',
            ),
        ),
        migrations.AddIndex(
            model_name='tagmodel',
            index=models.Index(fields=['is_active', 'sort_order'], name='tags_active_sort_idx'),
        ),
        migrations.AddIndex(
            model_name='tagmodel',
            index=models.Index(fields=['category', 'is_active'], name='tags_category_active_idx'),
        ),
        migrations.AddConstraint(
            model_name='tagmodel',
            constraint=models.UniqueConstraint(
                django.db.models.functions.text.Lower('name'),
                condition=models.Q(('category__isnull', True)),
                name='uniq_global_tag_name_ci',
            ),
        ),
        migrations.AddConstraint(
            model_name='tagmodel',
            constraint=models.UniqueConstraint(
                django.db.models.functions.text.Lower('name'),
                models.F('category'),
                condition=models.Q(('category__isnull', False)),
                name='uniq_scoped_tag_name_ci',
            ),
        ),
        migrations.AddConstraint(
            model_name='tagmodel',
            constraint=models.UniqueConstraint(
                condition=models.Q(('category__isnull', True)),
                fields=('slug',),
                name='uniq_global_tag_slug',
            ),
        ),
        migrations.AddConstraint(
            model_name='tagmodel',
            constraint=models.UniqueConstraint(
                condition=models.Q(('category__isnull', False)),
                fields=('slug', 'category'),
                name='uniq_scoped_tag_slug',
            ),
        ),
    ]

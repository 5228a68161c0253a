"""Read-only JSON endpoints over the seeded site content."""
from flask import Blueprint, jsonify

from auth import login_required
from models import AboutPage, Solution, Client, Contact, Insight, Project

content_bp = Blueprint('content', __name__)


def _iso(value):
    return value.isoformat() if value else None


def about_to_dict(section: AboutPage) -> dict:
    return {
        'section': section.section,
        'title': section.title,
        'subtitle': section.subtitle,
        'body': section.body,
        'image': section.image,
    }


def solution_to_dict(solution: Solution) -> dict:
    return {
        'slug': solution.slug,
        'title': solution.title,
        'summary': solution.summary,
        'description': solution.description,
        'icon': solution.icon,
        'features': solution.feature_list,
    }


def client_to_dict(client: Client) -> dict:
    return {
        'name': client.name,
        'industry': client.industry,
        'logo': client.logo,
        'website': client.website,
        'testimonial': client.testimonial,
        'is_featured': client.is_featured,
    }


def insight_to_dict(insight: Insight, full: bool = False) -> dict:
    data = {
        'slug': insight.slug,
        'title': insight.title,
        'category': insight.category,
        'excerpt': insight.excerpt,
        'author': insight.author,
        'published_at': _iso(insight.published_at),
    }
    if full:
        data['body'] = insight.body
    return data


def project_to_dict(project: Project, full: bool = False) -> dict:
    data = {
        'slug': project.slug,
        'title': project.title,
        'client_name': project.client_name,
        'category': project.category,
        'summary': project.summary,
        'image': project.image,
        'completed_at': _iso(project.completed_at),
        'is_featured': project.is_featured,
    }
    if full:
        data['description'] = project.description
    return data


def contact_to_dict(contact: Contact) -> dict:
    return {
        'id': contact.id,
        'name': contact.name,
        'email': contact.email,
        'phone': contact.phone,
        'company': contact.company,
        'subject': contact.subject,
        'message': contact.message,
        'status': contact.status,
        'created_at': _iso(contact.created_at),
    }


def _not_found(kind):
    return jsonify({'error': f'{kind} not found'}), 404


@content_bp.route('/api/health')
def health():
    return jsonify({'status': 'ok'})


@content_bp.route('/api/about')
def about():
    sections = AboutPage.query.order_by(AboutPage.sort_order, AboutPage.id).all()
    return jsonify({'sections': [about_to_dict(s) for s in sections]})


@content_bp.route('/api/solutions')
def solutions():
    rows = (
        Solution.query.filter_by(is_active=True)
        .order_by(Solution.sort_order, Solution.id)
        .all()
    )
    return jsonify({'solutions': [solution_to_dict(s) for s in rows]})


@content_bp.route('/api/clients')
def clients():
    rows = Client.query.order_by(Client.sort_order, Client.name).all()
    return jsonify({'clients': [client_to_dict(c) for c in rows]})


@content_bp.route('/api/insights')
def insights():
    rows = (
        Insight.query.filter_by(is_published=True)
        .order_by(Insight.published_at.desc(), Insight.id.desc())
        .all()
    )
    return jsonify({'insights': [insight_to_dict(i) for i in rows]})


@content_bp.route('/api/insights/<slug>')
def insight_detail(slug):
    insight = Insight.query.filter_by(slug=slug, is_published=True).first()
    if insight is None:
        return _not_found('insight')
    return jsonify(insight_to_dict(insight, full=True))


@content_bp.route('/api/projects')
def projects():
    rows = Project.query.order_by(Project.completed_at.desc(), Project.id.desc()).all()
    return jsonify({'projects': [project_to_dict(p) for p in rows]})


@content_bp.route('/api/projects/<slug>')
def project_detail(slug):
    project = Project.query.filter_by(slug=slug).first()
    if project is None:
        return _not_found('project')
    return jsonify(project_to_dict(project, full=True))


@content_bp.route('/admin/contacts')
@login_required
def admin_contacts():
    rows = Contact.query.order_by(Contact.created_at.desc(), Contact.id.desc()).all()
    return jsonify({'contacts': [contact_to_dict(c) for c in rows]})

"""Portfolio API: public portfolio content, contact form, AI chat and admin dashboard backend."""

import json

from flask import request


class AuditLogger:
    """Log important actions for audit trail"""
    
    @staticmethod
    def log_action(
        user_id: str,
        action: str,
        entity_type: str = None,
        entity_id: str = None,
        description: str = None,
        changes: dict = None,
        ip_address: str = None,
        user_agent: str = None
    ):
        """Log an action to audit trail"""
        from app.models import AuditLog
        from app.extensions import db
        
        log = AuditLog(
            user_id=user_id,
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            description=description,
            # Dates and decimals stored as strings
            changes=json.loads(json.dumps(changes, default=str)) if changes else None,
            ip_address=ip_address,
            user_agent=user_agent
        )
        
        db.session.add(log)
        db.session.commit()
        return log
    
    @staticmethod
    def log_admin_action(client, action, entity_type, entity_id, description, changes=None):
        """Audit entry for the current request's admin"""
        return AuditLogger.log_action(
            user_id=client.user.id,
            action=action,
            entity_type=entity_type,
            entity_id=entity_id,
            description=description,
            changes=changes,
            ip_address=request.remote_addr,
            user_agent=request.headers.get('User-Agent')
        )

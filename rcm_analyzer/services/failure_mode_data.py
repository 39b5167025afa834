"""
Default failure-mode knowledge base and industry templates.

Records use the wire format (camelCase keys) so they can be exported as-is.
This data ships with the application and is never mutated at runtime.
"""

from typing import Dict, List


def _mode(mode_id, equipment_type, description, causes, effects, detection_methods,
          preventive_actions, frequency, severity, detectability) -> Dict:
    return {
        'id': mode_id,
        'equipmentType': equipment_type,
        'description': description,
        'causes': causes,
        'effects': effects,
        'detectionMethods': detection_methods,
        'preventiveActions': preventive_actions,
        'frequency': frequency,
        'severity': severity,
        'detectability': detectability,
    }


INDUSTRY_TEMPLATES: Dict[str, List[str]] = {
    'Industrial': [
        'Compresor de Aire', 'Bomba Centrífuga', 'Motor Eléctrico', 'Transformador',
        'Generador', 'Caldera', 'Intercambiador de Calor', 'Válvula de Control',
        'Transportador', 'Grúa Industrial', 'Prensa Hidráulica', 'Torno CNC',
        'Fresadora', 'Soldadora', 'Horno Industrial',
    ],
    'Servicio': [
        'Servidor', 'Sistema de Comunicaciones', 'UPS', 'Sistema de Seguridad',
        'HVAC', 'Generador', 'Ascensor', 'Sistema de Iluminación',
        'Equipo de Oficina', 'Sistema de Red',
    ],
    'Salud': [
        'Resonancia Magnética', 'Tomógrafo', 'Rayos X', 'Ventilador Médico',
        'Autoclave', 'Generador de Oxígeno', 'Sistema de Gases Medicinales',
        'UPS Médico', 'Sistema de Climatización', 'Equipo de Laboratorio',
    ],
    'Educación': [
        'Proyector', 'Sistema de Audio', 'Computadora', 'Laboratorio',
        'HVAC', 'Generador', 'Sistema de Seguridad', 'Ascensor',
        'Cocina', 'Equipo Deportivo',
    ],
    'Minero': [
        'Excavadora', 'Camión Minero', 'Perforadora', 'Chancadora',
        'Molino', 'Flotadora', 'Bomba de Lodos', 'Transportador',
        'Compresor', 'Generador Diesel',
    ],
    'Logística': [
        'Montacargas', 'Transportador', 'Sistema de Clasificación', 'Grúa',
        'Camión', 'Sistema WMS', 'Báscula', 'Sistema de Refrigeración',
        'Compresor', 'Generador',
    ],
    'Comercio': [
        'Sistema POS', 'Refrigerador Comercial', 'HVAC', 'Sistema de Seguridad',
        'Escalera Mecánica', 'Ascensor', 'Sistema de Iluminación', 'Generador',
        'Sistema de Audio', 'Cámara Frigorífica',
    ],
}


DEFAULT_FAILURE_MODES: Dict[str, List[Dict]] = {
    # Industrial
    'Compresor de Aire': [
        _mode('CA001', 'Compresor de Aire', 'Sobrecalentamiento del compresor',
              ['Filtro de aire obstruido', 'Nivel bajo de aceite', 'Ventilación deficiente', 'Sobrecarga del sistema'],
              ['Parada automática', 'Daño en componentes internos', 'Reducción de eficiencia'],
              ['Termografía', 'Monitoreo de temperatura', 'Análisis de aceite'],
              ['Cambio de filtros', 'Verificación de aceite', 'Limpieza de radiadores'],
              'Medium', 'Major', 'High'),
        _mode('CA002', 'Compresor de Aire', 'Fuga de aire comprimido',
              ['Sellos desgastados', 'Conexiones flojas', 'Válvulas defectuosas', 'Tuberías dañadas'],
              ['Pérdida de presión', 'Consumo excesivo de energía', 'Ruido excesivo'],
              ['Detector ultrasónico', 'Medición de presión', 'Inspección visual'],
              ['Reemplazo de sellos', 'Ajuste de conexiones', 'Mantenimiento de válvulas'],
              'High', 'Moderate', 'Medium'),
    ],
    'Bomba Centrífuga': [
        _mode('BC001', 'Bomba Centrífuga', 'Cavitación',
              ['NPSH insuficiente', 'Velocidad excesiva', 'Temperatura alta del fluido'],
              ['Erosión del impulsor', 'Vibración', 'Reducción de eficiencia'],
              ['Análisis de vibración', 'Medición de presión', 'Análisis acústico'],
              ['Verificar NPSH disponible', 'Control de temperatura', 'Ajuste de velocidad'],
              'High', 'Major', 'Medium'),
        _mode('BC002', 'Bomba Centrífuga', 'Desgaste del impulsor',
              ['Fluido abrasivo', 'Velocidad excesiva', 'Cavitación prolongada', 'Materiales inadecuados'],
              ['Reducción de caudal', 'Pérdida de eficiencia', 'Vibración anormal'],
              ['Análisis de rendimiento', 'Inspección endoscópica', 'Medición de vibración'],
              ['Filtrado del fluido', 'Control de velocidad', 'Selección de materiales'],
              'Medium', 'Major', 'Medium'),
    ],
    'Motor Eléctrico': [
        _mode('ME001', 'Motor Eléctrico', 'Sobrecalentamiento del motor',
              ['Sobrecarga', 'Ventilación deficiente', 'Rodamientos desgastados', 'Desequilibrio de fases'],
              ['Reducción de vida útil', 'Parada no programada', 'Daño en devanados'],
              ['Termografía', 'Análisis de vibración', 'Medición de corriente'],
              ['Limpieza periódica', 'Lubricación de rodamientos', 'Verificación de carga'],
              'Medium', 'Major', 'High'),
        _mode('ME002', 'Motor Eléctrico', 'Falla de rodamientos',
              ['Falta de lubricación', 'Contaminación', 'Desalineación', 'Vibración excesiva'],
              ['Ruido excesivo', 'Vibración', 'Parada del equipo'],
              ['Análisis de vibración', 'Análisis de aceite', 'Termografía'],
              ['Programa de lubricación', 'Alineación precisa', 'Monitoreo de vibración'],
              'Medium', 'Major', 'Medium'),
        _mode('ME003', 'Motor Eléctrico', 'Falla en devanados',
              ['Sobretensión', 'Humedad', 'Contaminación', 'Envejecimiento del aislamiento'],
              ['Cortocircuito', 'Parada total', 'Riesgo de incendio'],
              ['Prueba de aislamiento', 'Termografía', 'Análisis de corriente'],
              ['Control de humedad', 'Limpieza regular', 'Pruebas eléctricas'],
              'Low', 'Critical', 'Medium'),
    ],
    'Transformador': [
        _mode('TR001', 'Transformador', 'Sobrecalentamiento del aceite',
              ['Sobrecarga', 'Falla en ventilación', 'Nivel bajo de aceite', 'Cortocircuito interno'],
              ['Degradación del aislamiento', 'Formación de gases', 'Parada del transformador'],
              ['Termografía', 'Análisis de gases disueltos', 'Monitoreo de temperatura'],
              ['Control de carga', 'Mantenimiento de ventiladores', 'Análisis de aceite'],
              'Medium', 'Critical', 'High'),
    ],
    'Generador': [
        _mode('GE001', 'Generador', 'Falla en el sistema de combustible',
              ['Combustible contaminado', 'Filtros obstruidos', 'Bomba de combustible defectuosa'],
              ['Parada del generador', 'Funcionamiento irregular', 'Daño en inyectores'],
              ['Análisis de combustible', 'Monitoreo de presión', 'Inspección visual'],
              ['Filtrado de combustible', 'Cambio de filtros', 'Limpieza de tanques'],
              'Medium', 'Major', 'Medium'),
    ],

    # Health
    'Resonancia Magnética': [
        _mode('RM001', 'Resonancia Magnética', 'Pérdida de helio criogénico',
              ['Fuga en el sistema criogénico', 'Falla en compresor', 'Válvulas defectuosas'],
              ['Pérdida de campo magnético', 'Parada del equipo', 'Costo elevado de reposición'],
              ['Monitoreo de nivel de helio', 'Detector de fugas', 'Alarmas del sistema'],
              ['Inspección de sellos', 'Mantenimiento preventivo', 'Monitoreo continuo'],
              'Low', 'Critical', 'High'),
    ],
    'Tomógrafo': [
        _mode('TO001', 'Tomógrafo', 'Falla en tubo de rayos X',
              ['Sobrecalentamiento', 'Desgaste del ánodo', 'Falla en refrigeración'],
              ['Pérdida de calidad de imagen', 'Parada del equipo', 'Costo elevado de reemplazo'],
              ['Monitoreo de temperatura', 'Análisis de calidad de imagen', 'Diagnóstico del sistema'],
              ['Control de temperatura', 'Mantenimiento de refrigeración', 'Calibración regular'],
              'Medium', 'Critical', 'Medium'),
    ],
    'Ventilador Médico': [
        _mode('VM001', 'Ventilador Médico', 'Falla en sensores de presión',
              ['Calibración incorrecta', 'Contaminación', 'Desgaste de componentes'],
              ['Alarmas falsas', 'Ventilación inadecuada', 'Riesgo para el paciente'],
              ['Calibración de sensores', 'Pruebas funcionales', 'Monitoreo de alarmas'],
              ['Calibración regular', 'Limpieza de sensores', 'Reemplazo preventivo'],
              'Medium', 'Critical', 'High'),
    ],

    # Mining
    'Excavadora': [
        _mode('EX001', 'Excavadora', 'Falla en sistema hidráulico',
              ['Aceite contaminado', 'Sellos desgastados', 'Sobrecarga del sistema'],
              ['Pérdida de potencia', 'Movimientos lentos', 'Parada del equipo'],
              ['Análisis de aceite', 'Medición de presión', 'Inspección visual'],
              ['Cambio de aceite', 'Reemplazo de filtros', 'Inspección de sellos'],
              'High', 'Major', 'Medium'),
    ],
    'Camión Minero': [
        _mode('CM001', 'Camión Minero', 'Desgaste de neumáticos',
              ['Sobrecarga', 'Presión inadecuada', 'Condiciones de terreno', 'Velocidad excesiva'],
              ['Reducción de tracción', 'Aumento de consumo', 'Riesgo de accidente'],
              ['Inspección visual', 'Medición de profundidad', 'Monitoreo de presión'],
              ['Control de carga', 'Mantenimiento de presión', 'Rotación de neumáticos'],
              'High', 'Major', 'High'),
    ],

    # Service
    'Servidor': [
        _mode('SV001', 'Servidor', 'Sobrecalentamiento de CPU',
              ['Ventiladores defectuosos', 'Acumulación de polvo', 'Sobrecarga de procesamiento'],
              ['Reducción de rendimiento', 'Paradas inesperadas', 'Daño en componentes'],
              ['Monitoreo de temperatura', 'Alertas del sistema', 'Análisis de rendimiento'],
              ['Limpieza regular', 'Mantenimiento de ventiladores', 'Monitoreo de carga'],
              'Medium', 'Major', 'High'),
    ],
    'UPS': [
        _mode('UP001', 'UPS', 'Degradación de baterías',
              ['Envejecimiento', 'Ciclos de carga/descarga', 'Temperatura elevada'],
              ['Reducción de autonomía', 'Falla en respaldo', 'Parada de sistemas críticos'],
              ['Prueba de baterías', 'Monitoreo de voltaje', 'Análisis de impedancia'],
              ['Reemplazo programado', 'Control de temperatura', 'Pruebas regulares'],
              'Medium', 'Critical', 'Medium'),
    ],
    'Sistema HVAC': [
        _mode('HVAC001', 'Sistema HVAC', 'Falla del compresor',
              ['Falta de refrigerante', 'Filtros sucios', 'Sobrecalentamiento'],
              ['Pérdida de enfriamiento', 'Consumo excesivo de energía', 'Parada del sistema'],
              ['Medición de presiones', 'Termografía', 'Análisis de corriente'],
              ['Cambio de filtros', 'Verificación de refrigerante', 'Limpieza de condensadores'],
              'Medium', 'Major', 'High'),
    ],

    # Logistics
    'Montacargas': [
        _mode('MC001', 'Montacargas', 'Falla en sistema de elevación',
              ['Aceite hidráulico contaminado', 'Cilindros desgastados', 'Válvulas defectuosas'],
              ['Pérdida de capacidad de carga', 'Movimientos erráticos', 'Riesgo de accidente'],
              ['Análisis de aceite', 'Pruebas de presión', 'Inspección visual'],
              ['Cambio de aceite', 'Mantenimiento de cilindros', 'Calibración de válvulas'],
              'Medium', 'Major', 'Medium'),
    ],

    # Commerce
    'Sistema POS': [
        _mode('POS001', 'Sistema POS', 'Falla en lector de tarjetas',
              ['Desgaste mecánico', 'Suciedad en contactos', 'Falla electrónica'],
              ['Rechazo de transacciones', 'Pérdida de ventas', 'Insatisfacción del cliente'],
              ['Pruebas de transacción', 'Inspección visual', 'Diagnóstico del sistema'],
              ['Limpieza regular', 'Calibración', 'Reemplazo preventivo'],
              'Medium', 'Moderate', 'High'),
    ],
    'Refrigerador Comercial': [
        _mode('RC001', 'Refrigerador Comercial', 'Pérdida de refrigeración',
              ['Fuga de refrigerante', 'Compresor defectuoso', 'Evaporador obstruido'],
              ['Pérdida de productos', 'Aumento de temperatura', 'Costos de reposición'],
              ['Monitoreo de temperatura', 'Medición de presiones', 'Inspección visual'],
              ['Mantenimiento de sellos', 'Limpieza de evaporadores', 'Verificación de refrigerante'],
              'Medium', 'Major', 'High'),
    ],

    # Education
    'Proyector': [
        _mode('PR001', 'Proyector', 'Degradación de lámpara',
              ['Horas de uso', 'Sobrecalentamiento', 'Calidad de energía'],
              ['Reducción de brillo', 'Calidad de imagen deficiente', 'Parada del equipo'],
              ['Monitoreo de horas', 'Medición de brillo', 'Inspección visual'],
              ['Reemplazo programado', 'Control de temperatura', 'Limpieza de filtros'],
              'High', 'Moderate', 'High'),
    ],
    'Laboratorio': [
        _mode('LAB001', 'Laboratorio', 'Falla en sistema de ventilación',
              ['Filtros obstruidos', 'Ventiladores defectuosos', 'Ductos dañados'],
              ['Contaminación del ambiente', 'Riesgo para la salud', 'Resultados incorrectos'],
              ['Medición de flujo de aire', 'Monitoreo de calidad', 'Inspección visual'],
              ['Cambio de filtros', 'Mantenimiento de ventiladores', 'Limpieza de ductos'],
              'Medium', 'Critical', 'Medium'),
    ],
}


def get_equipment_types_for_industry(industry: str) -> List[str]:
    """Equipment-type names of an industry template; empty for unknown industries."""
    return list(INDUSTRY_TEMPLATES.get(industry, []))

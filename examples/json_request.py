"""Answer a JSON request the way a service endpoint would"""
import json

from py_mcdrag import McDragCalculator, ParseError

calc = McDragCalculator(indent=2)

request = {
    "identification": "20mm HE",
    "ref_diameter": 20.0,
    "total_length": 4.5,
    "nose_length": 1.8,
    "rt_r": 0.5,
    "boattail_length": 0.6,
    "base_diameter": 0.85,
    "meplat_diameter": 0.15,
    "band_diameter": 1.04,
    "boundary_layer": "T/T",
}
response = json.loads(calc.handle_request(json.dumps(request)))
for row in response['coefficients'][::5]:
    print(f"M={row['mach']:5.3f}  CD0={row['cd0']:.3f}")
print(response['diagnostics'])

try:
    calc.set_input('{"ref_diameter": 20.0}')
except ParseError as error:
    print(f"Rejected: {error}")
